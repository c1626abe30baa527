"""Shared Rich console.

The countdown line, cursor show/hide codes and command output all go through
one Console and so land on the same stream.
"""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=2)
def get_console(highlight: bool = False) -> Console:
    """Get the shared Console. Numbers in messages are not auto-highlighted."""
    return Console(highlight=highlight)
