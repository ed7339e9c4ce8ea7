# core/credits_index/file_mapper.py
"""
Acquire and release the memory-mapped credits files.
"""
import logging
import mmap
from pathlib import Path
from typing import Optional, Union
from config import PathConfig
from .record_buffer import RecordBuffer

logger = logging.getLogger(__name__)

class MappedFile:
    """One credits file opened read-only and memory-mapped in full."""

    def __init__(self, path: Union[str, Path]):
        """
        Args:
            path: File to map

        Raises:
            FileNotFoundError: if the file does not exist
            ValueError: if the file is empty (mmap cannot map zero bytes)
        """
        self.path = Path(path)
        if not self.path.exists():
            raise FileNotFoundError(f"Credits file not found: {self.path}")

        self._file = open(self.path, 'rb')
        try:
            self._mmap = mmap.mmap(self._file.fileno(), 0, access=mmap.ACCESS_READ)
        except (OSError, ValueError):
            self._file.close()
            raise
        self.file_size = len(self._mmap)

    @property
    def data(self) -> mmap.mmap:
        return self._mmap

    def buffer(self) -> RecordBuffer:
        return RecordBuffer(self._mmap, name=self.path.name)

    def close(self):
        """Clean up resources"""
        if getattr(self, '_mmap', None) is not None and not self._mmap.closed:
            self._mmap.close()
        if getattr(self, '_file', None) is not None and not self._file.closed:
            self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

class CreditsFiles:
    """
    Storage provider for the actordata/moviedata pair.

    Opening never raises: a missing or unmappable file leaves the instance
    not good(), with the reason in `error`. Whatever was mapped before the
    failure is released immediately.
    """

    def __init__(self, data_dir: Optional[Union[str, Path]] = None):
        self.data_dir = Path(data_dir) if data_dir else PathConfig.get_data_dir()
        self.actor_file: Optional[MappedFile] = None
        self.movie_file: Optional[MappedFile] = None
        self.error: Optional[str] = None

        try:
            self.actor_file = MappedFile(PathConfig.get_actor_file(self.data_dir))
            self.movie_file = MappedFile(PathConfig.get_movie_file(self.data_dir))
        except (OSError, ValueError) as e:
            self.error = str(e)
            logger.error(f"Could not map credits files from {self.data_dir}: {e}")
            self.close()
            return

        logger.debug(
            f"Mapped {self.actor_file.path.name} ({self.actor_file.file_size:,} bytes) and "
            f"{self.movie_file.path.name} ({self.movie_file.file_size:,} bytes)"
        )

    def good(self) -> bool:
        return self.actor_file is not None and self.movie_file is not None

    def actor_buffer(self) -> RecordBuffer:
        if not self.good():
            raise RuntimeError(f"Credits files are not available: {self.error}")
        return self.actor_file.buffer()

    def movie_buffer(self) -> RecordBuffer:
        if not self.good():
            raise RuntimeError(f"Credits files are not available: {self.error}")
        return self.movie_file.buffer()

    def close(self):
        """Release both mappings. Safe to call more than once."""
        for mapped in (self.actor_file, self.movie_file):
            if mapped is not None:
                mapped.close()
        self.actor_file = None
        self.movie_file = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
