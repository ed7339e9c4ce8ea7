# ui/cli/console_utils.py
from config import FRAME_WIDTH

def print_header(title):
    """Print a clean header with title."""
    print("\n" + "═" * FRAME_WIDTH)
    print(f"  {title}")
    print("═" * FRAME_WIDTH)

def format_elapsed_time(seconds: float) -> str:
    """Format elapsed time in a human-readable way."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    elif seconds < 3600:
        minutes = int(seconds // 60)
        seconds = seconds % 60
        return f"{minutes}m {seconds:.0f}s"
    else:
        hours = int(seconds // 3600)
        minutes = int((seconds % 3600) // 60)
        return f"{hours}h {minutes}m"

def format_hops(hops: int) -> str:
    return "1 hop" if hops == 1 else f"{hops} hops"

def print_path(path, elapsed=None):
    """Print one line per hop of a ConnectionPath, then a summary line."""
    print()
    for line in str(path).splitlines():
        print(f"  {line}")
    summary = f"  {format_hops(path.hops)}"
    if elapsed is not None:
        summary += f" - found in {format_elapsed_time(elapsed)}"
    print(summary)
