# ui/cli/interactive_search.py
"""
Interactive prompt loop: ask for pairs of actors until the user leaves.
"""
from typing import Optional, Tuple
from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style
from core.path_engine.orchestrator import PathOrchestrator
from ui.cli.console_utils import print_header
from ui.cli.search_screen import run_search

PROMPT_STYLE = Style.from_dict({
    'prompt': 'bold ansicyan',
})

def _ask_pair(session: PromptSession) -> Optional[Tuple[str, str]]:
    """Ask for two names. Returns None when the user enters nothing or quits."""
    start = session.prompt([('class:prompt', '  Start actor: ')], style=PROMPT_STYLE).strip()
    if not start:
        return None
    end = session.prompt([('class:prompt', '  End actor:   ')], style=PROMPT_STYLE).strip()
    if not end:
        return None
    return start, end

def interactive_search(orchestrator: PathOrchestrator, session: Optional[PromptSession] = None) -> int:
    """
    Prompt for actor pairs and print each path.

    Returns:
        Number of searches run
    """
    session = session or PromptSession(history=InMemoryHistory())
    print_header("🎬 Six Degrees - Interactive Search")
    print("\n  Enter two actor names exactly as they appear in the index.")
    print("  Leave a name empty (or press Ctrl-D) to quit.\n")

    searches = 0
    while True:
        try:
            pair = _ask_pair(session)
        except (EOFError, KeyboardInterrupt):
            break
        if pair is None:
            break
        run_search(orchestrator, *pair)
        searches += 1
        print()
    return searches
