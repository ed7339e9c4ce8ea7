import json
import logging
from pathlib import Path
from config import PathConfig

class ConfigManager:
    LOG_LEVEL_CHOICES = ('DEBUG', 'INFO', 'WARNING', 'ERROR')

    DEFAULT_SETTINGS = {
        'data_dir': None,                # None = PathConfig default
        'search_timeout_seconds': None,  # None = search until the queue drains
        'log_level': 'WARNING',
        'show_elapsed_time': True
    }

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.load()
        return cls._instance

    def load(self, config_path=None):
        self.config_path = Path(config_path) if config_path else PathConfig.get_config_path()
        try:
            if self.config_path.exists():
                with open(self.config_path, 'r') as f:
                    self.settings = json.load(f)
                if not isinstance(self.settings, dict):
                    raise ValueError("Config file must hold a JSON object")

                # Ensure new settings exist
                for key, default in self.DEFAULT_SETTINGS.items():
                    if key not in self.settings:
                        self.settings[key] = default
            else:
                self.settings = self.DEFAULT_SETTINGS.copy()
        except (OSError, ValueError):
            self.settings = self.DEFAULT_SETTINGS.copy()

    def save(self):
        with open(self.config_path, 'w') as f:
            json.dump(self.settings, f, indent=2)

    def get(self, key, default=None):
        return self.settings.get(key, default)

    def set(self, key, value):
        self.settings[key] = value
        self.save()

    def get_data_dir(self):
        """Configured data directory, falling back to PathConfig."""
        data_dir = self.get('data_dir')
        return Path(data_dir) if data_dir else PathConfig.get_data_dir()

    def set_data_dir(self, value):
        self.set('data_dir', str(value) if value else None)

    def get_search_timeout(self):
        return self.get('search_timeout_seconds')

    def set_search_timeout(self, value):
        """Set the per-search time limit in seconds (None or 0 disables it)."""
        if value is None or float(value) == 0:
            self.set('search_timeout_seconds', None)
            return
        value = float(value)
        if value < 0:
            raise ValueError("Search timeout must be positive")
        self.set('search_timeout_seconds', value)

    def get_log_level(self) -> int:
        name = str(self.get('log_level', 'WARNING')).upper()
        if name not in self.LOG_LEVEL_CHOICES:
            name = 'WARNING'
        return getattr(logging, name)

    def set_log_level(self, value: str):
        value = value.upper()
        if value not in self.LOG_LEVEL_CHOICES:
            raise ValueError(f"Invalid log level: {value}")
        self.set('log_level', value)

    def get_show_elapsed_time(self) -> bool:
        return bool(self.get('show_elapsed_time', True))

    def set_show_elapsed_time(self, value):
        self.set('show_elapsed_time', bool(value))

# Singleton access
config_manager = ConfigManager()
