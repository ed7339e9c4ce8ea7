# main.py
import sys
import logging
import argparse
from config import VERSION
from core.path_engine.orchestrator import PathOrchestrator
from core.utilities.config_manager import config_manager
from core.utilities.setup_validator import validate_credits_files
from ui.cli.search_screen import run_search, EXIT_FOUND, EXIT_NOT_FOUND, EXIT_UNAVAILABLE

def build_parser():
    parser = argparse.ArgumentParser(
        prog="sixdegrees",
        description="Find the shortest chain of shared films between two actors."
    )
    parser.add_argument('start', nargs='?', help='Actor to start from')
    parser.add_argument('end', nargs='?', help='Actor to reach')
    parser.add_argument(
        '--data-dir',
        help='Directory holding actordata and moviedata'
    )
    parser.add_argument(
        '--interactive',
        action='store_true',
        help='Prompt for actor pairs until an empty name is entered'
    )
    parser.add_argument(
        '--check',
        action='store_true',
        help='Validate the credits files and exit'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log search details'
    )
    parser.add_argument('--version', action='version', version=f"%(prog)s {VERSION}")
    return parser

def configure_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else config_manager.get_log_level(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

def main(argv=None) -> int:
    """Main entry point for Six Degrees."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    data_dir = args.data_dir or config_manager.get_data_dir()

    if args.check:
        is_valid, message = validate_credits_files(data_dir)
        print(f"\n  {'✅' if is_valid else '❗️'} {message}")
        return EXIT_FOUND if is_valid else EXIT_UNAVAILABLE

    if not args.interactive and (args.start is None or args.end is None):
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: expected <start actor> <end actor>", file=sys.stderr)
        return EXIT_NOT_FOUND

    with PathOrchestrator.from_directory(data_dir) as orchestrator:
        if not orchestrator.ready:
            print(f"\n  ❗️ Credits files unavailable: {orchestrator.error}", file=sys.stderr)
            return EXIT_UNAVAILABLE

        if args.interactive:
            from ui.cli.interactive_search import interactive_search
            interactive_search(orchestrator)
            return EXIT_FOUND

        return run_search(orchestrator, args.start, args.end)

if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nGoodbye!")
        sys.exit(0)
