# core/path_engine/path_search.py
"""
Breadth-first shortest-path search over the actor <-> film graph.
"""
import logging
import threading
import time
from collections import deque
from typing import Deque, Optional, Set
from core.credits_index.record_buffer import DecodeError
from core.credits_index.record_decoder import Film
from .connection_path import ConnectionPath
from .credits_graph import CreditsGraph

logger = logging.getLogger(__name__)

class SearchCancelled(Exception):
    """The search was stopped through its CancellationToken before finishing."""

class CancellationToken:
    """
    Cooperative stop signal for a running search.

    Can be cancelled explicitly from another thread, or expire on its own
    after `timeout` seconds.
    """

    def __init__(self, timeout: Optional[float] = None):
        self._event = threading.Event()
        self.deadline = time.monotonic() + timeout if timeout is not None else None

    def cancel(self):
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        if self._event.is_set():
            return True
        return self.deadline is not None and time.monotonic() >= self.deadline

    def raise_if_cancelled(self):
        if self.is_cancelled:
            raise SearchCancelled("Search cancelled before a path was found")

def find_shortest_path(graph: CreditsGraph,
                       start: str,
                       end: str,
                       cancel_token: Optional[CancellationToken] = None) -> Optional[ConnectionPath]:
    """
    Find a shortest chain of shared films from `start` to `end`.

    Ties between equally short chains go to the first one discovered, which
    follows the order films and cast members are stored in the records, so
    repeated searches return identical paths.

    Args:
        graph: Neighbour queries over the loaded credits files
        start: Exact name of the first actor
        end: Exact name of the last actor
        cancel_token: Optional token, checked once per dequeued path

    Returns:
        The path, or None if no chain connects the two actors

    Raises:
        SearchCancelled: if `cancel_token` was cancelled or expired
    """
    if start == end:
        return ConnectionPath(start)

    queue: Deque[ConnectionPath] = deque([ConnectionPath(start)])
    seen_actors: Set[str] = {start}
    seen_films: Set[Film] = set()
    expanded = 0

    while queue:
        if cancel_token is not None:
            cancel_token.raise_if_cancelled()

        current = queue.popleft()
        actor = current.last_actor
        if actor == end:
            logger.debug(
                f"Found {current.hops}-hop path after expanding {expanded:,} actors "
                f"and {len(seen_films):,} films"
            )
            return current

        try:
            credits = graph.films_of(actor)
        except DecodeError as e:
            logger.warning(f"Skipping unreadable credits for {actor!r}: {e}")
            continue
        expanded += 1
        if not credits:
            continue

        for film in credits:
            if film in seen_films:
                continue
            seen_films.add(film)

            try:
                cast = graph.cast_of(film)
            except DecodeError as e:
                logger.warning(f"Skipping unreadable cast of {film}: {e}")
                continue
            if not cast:
                continue

            for co_star in cast:
                if co_star not in seen_actors:
                    seen_actors.add(co_star)
                    queue.append(current.extended(film, co_star))

    logger.debug(f"No path from {start!r} to {end!r} after expanding {expanded:,} actors")
    return None
