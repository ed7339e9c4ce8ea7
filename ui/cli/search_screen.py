# ui/cli/search_screen.py
"""
Run one search and report the outcome on the console.
"""
import logging
import time
from core.credits_index.record_buffer import DecodeError
from core.path_engine.orchestrator import PathOrchestrator
from core.path_engine.path_search import CancellationToken, SearchCancelled
from core.utilities.config_manager import config_manager
from ui.cli.console_utils import print_path, format_elapsed_time

logger = logging.getLogger(__name__)

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_UNAVAILABLE = 2

def run_search(orchestrator: PathOrchestrator, start: str, end: str) -> int:
    """
    Search for a path between two actors and print the result.

    Returns:
        EXIT_FOUND if a path was printed, EXIT_NOT_FOUND if not,
        EXIT_UNAVAILABLE if the credits index could not be read
    """
    try:
        for name in (start, end):
            if not orchestrator.has_actor(name):
                print(f"\n  ❗️ '{name}' was not found in the index.")
                return EXIT_NOT_FOUND
    except DecodeError as e:
        logger.error(f"Actor lookup failed: {e}")
        print(f"\n  ❌ The credits index is corrupt: {e}")
        return EXIT_UNAVAILABLE

    timeout = config_manager.get_search_timeout()
    token = CancellationToken(timeout) if timeout else None

    start_time = time.time()
    try:
        path = orchestrator.shortest_path(start, end, token)
    except SearchCancelled:
        print(f"\n  ⚠️  Search timed out after {format_elapsed_time(time.time() - start_time)}")
        return EXIT_NOT_FOUND
    elapsed = time.time() - start_time
    logger.info(f"Search {start!r} -> {end!r} took {elapsed:.3f}s")

    if path is None:
        print("\n  No path found")
        return EXIT_NOT_FOUND

    print_path(path, elapsed if config_manager.get_show_elapsed_time() else None)
    return EXIT_FOUND
