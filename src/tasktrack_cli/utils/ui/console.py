"""Shared rich console for tasktrack output."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=1)
def get_console() -> Console:
    """Return the process-wide console every command and formatter prints to."""
    return Console()


def set_color(enabled: bool) -> None:
    """Turn colour and styling on or off for all subsequent output."""
    get_console().no_color = not enabled
