"""Terminal size detection.

Pagers only consume the two integers returned here; nothing in this
module talks to the terminal beyond asking for its size.
"""

import shutil
from typing import Tuple

DEFAULT_SIZE = (80, 24)


def terminal_size(fallback: Tuple[int, int] = DEFAULT_SIZE) -> Tuple[int, int]:
    """Return (columns, lines) of the controlling terminal.

    Args:
        fallback: Size used when the terminal size can't be queried.

    Returns:
        Tuple of (width, height), both at least 1.
    """
    try:
        size = shutil.get_terminal_size(fallback)
        width, height = size.columns, size.lines
    except (ValueError, OSError):
        width, height = fallback

    return max(width, 1), max(height, 1)


def page_width() -> int:
    """The terminal width."""
    return terminal_size()[0]


def page_height() -> int:
    """The terminal height."""
    return terminal_size()[1]


def is_tty(stream) -> bool:
    """Check whether a stream is attached to an interactive terminal."""
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # I/O operation on closed file
        return False
