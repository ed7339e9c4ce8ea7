# core/path_engine/orchestrator.py
import logging
from pathlib import Path
from typing import Optional, Union
from core.credits_index.file_mapper import CreditsFiles
from core.credits_index.record_buffer import RecordBuffer, DecodeError
from .connection_path import ConnectionPath
from .credits_graph import CreditsGraph
from .path_search import CancellationToken, find_shortest_path

logger = logging.getLogger(__name__)

class PathOrchestrator:
    """High-level entry point: two credits buffers in, shortest paths out."""

    def __init__(self,
                 actor_buffer: Optional[RecordBuffer],
                 movie_buffer: Optional[RecordBuffer],
                 files: Optional[CreditsFiles] = None):
        """
        Initialize the orchestrator.

        Args:
            actor_buffer: actordata contents, or None if acquisition failed
            movie_buffer: moviedata contents, or None if acquisition failed
            files: Storage provider to release on close(), if this instance owns one
        """
        self.files = files
        self.graph: Optional[CreditsGraph] = None
        self.error: Optional[str] = None

        if actor_buffer is None or movie_buffer is None:
            self.error = files.error if files is not None and files.error else "Credits buffers unavailable"
            return

        try:
            self.graph = CreditsGraph(actor_buffer, movie_buffer)
        except DecodeError as e:
            self.error = f"Unreadable credits header: {e}"
            logger.error(self.error)
            return

        logger.info(
            f"Credits index ready: {len(self.graph.actors):,} actors, "
            f"{len(self.graph.films):,} films"
        )

    @classmethod
    def from_directory(cls, data_dir: Optional[Union[str, Path]] = None) -> "PathOrchestrator":
        """Map actordata/moviedata from `data_dir` (default: PathConfig) and wrap them."""
        files = CreditsFiles(data_dir)
        if not files.good():
            return cls(None, None, files=files)
        orchestrator = cls(files.actor_buffer(), files.movie_buffer(), files=files)
        if not orchestrator.ready:
            files.close()
        return orchestrator

    @classmethod
    def from_bytes(cls, actor_data: bytes, movie_data: bytes) -> "PathOrchestrator":
        return cls(RecordBuffer(actor_data, "actordata"), RecordBuffer(movie_data, "moviedata"))

    @property
    def ready(self) -> bool:
        return self.graph is not None

    def has_actor(self, name: str) -> bool:
        self._require_ready()
        return self.graph.has_actor(name)

    def shortest_path(self, start: str, end: str,
                      cancel_token: Optional[CancellationToken] = None) -> Optional[ConnectionPath]:
        """
        Shortest chain of co-appearances between two actors.

        Returns:
            ConnectionPath (zero hops when start == end), or None if no chain exists
        """
        self._require_ready()
        return find_shortest_path(self.graph, start, end, cancel_token)

    def _require_ready(self):
        if not self.ready:
            raise RuntimeError(f"Path search is not ready: {self.error}")

    def close(self):
        self.graph = None
        if self.files is not None:
            self.files.close()
            self.files = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
