# config.py
import os
import tomllib
from pathlib import Path

def _get_version():
    """Read Six Degrees' version from pyproject.toml"""
    try:
        pyproject_path = Path(__file__).parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
        return data["project"]["version"]
    except Exception:
        return "unknown"  # Fallback if pyproject.toml is missing

VERSION = _get_version()
FRAME_WIDTH = 70 # For CLI UI headings
DATA_DIR_ENV = "SIXDEGREES_DATA_DIR"

# Constants pertaining to the file structure of data/actordata and data/moviedata
ACTOR_FILE_NAME = "actordata"
MOVIE_FILE_NAME = "moviedata"
RECORD_ENCODING = "latin-1"     # Single-byte names; keeps str order == byte order
YEAR_BASE = 1900                # Film records store year - 1900 in one byte

class PathConfig:
    BASE_DIR = Path(__file__).parent
    DATA = BASE_DIR / "data"

    @classmethod
    def get_data_dir(cls):
        """Data directory, overridable through the SIXDEGREES_DATA_DIR variable"""
        override = os.environ.get(DATA_DIR_ENV)
        return Path(override) if override else cls.DATA

    @classmethod
    def get_actor_file(cls, data_dir=None):
        return Path(data_dir or cls.get_data_dir()) / ACTOR_FILE_NAME

    @classmethod
    def get_movie_file(cls, data_dir=None):
        return Path(data_dir or cls.get_data_dir()) / MOVIE_FILE_NAME

    @classmethod
    def get_all_required_files(cls, data_dir=None):
        """Return all required files for a search"""
        return [
            cls.get_actor_file(data_dir),
            cls.get_movie_file(data_dir)
        ]

    @classmethod
    def get_config_path(cls):
        return cls.BASE_DIR / "config.json"
