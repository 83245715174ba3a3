"""Console utilities for TaskFeed CLI."""

from functools import lru_cache

from rich.console import Console

# Wide enough for a month-long timeline without wrapping.
EXPORT_WIDTH = 160


@lru_cache(maxsize=2)
def get_console(highlight: bool = True) -> Console:
    """Get a Rich Console instance for consistent output formatting."""
    return Console(highlight=highlight)


def get_recording_console(width: int = EXPORT_WIDTH) -> Console:
    """Get a fresh Console that records output for HTML/text export."""
    return Console(record=True, width=width, highlight=False)
