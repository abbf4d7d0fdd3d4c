"""Word wrapping for the basic pager.

Rows are measured in terminal columns: wide (East Asian) characters take
two columns, combining marks, control characters and ANSI escape sequences
none, and tabs run to the next tab stop.

Lines are broken at whitespace where possible and words wider than the
screen are hard-broken. Whitespace between words stays at the end of the
row before the break, so no row starts with it and joining the rows of a
wrapped line gives back the line itself.
"""

import re
import unicodedata
from typing import List

TAB_STOP = 8

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")

_LINE_RE = re.compile(r"[^\n]*\n|[^\n]+")
_TOKEN_RE = re.compile(r"\s+|\S+")
_UNIT_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]|.", re.DOTALL)


def split_lines(text: str) -> List[str]:
    """Split text into lines, each keeping its trailing newline.

    Args:
        text: Text to split.

    Returns:
        List of lines. The last one has no newline if the text didn't end
        with one. Empty text gives an empty list.
    """
    return _LINE_RE.findall(text)


def char_display_width(ch: str, col: int = 0) -> int:
    """Columns a single character takes when printed at column col."""
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch) or unicodedata.category(ch) in ("Cc", "Cf"):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str, col: int = 0) -> int:
    """Columns text takes when printed starting at column col."""
    start = col
    for unit in _UNIT_RE.findall(text):
        if len(unit) == 1:
            col += char_display_width(unit, col)
    return col - start


def _terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return "\r\n"
    if line.endswith("\n"):
        return "\n"
    return ""


def _has_text(row: str) -> bool:
    return display_width(row.strip()) > 0


def wrap_line(line: str, width: int) -> List[str]:
    """Wrap a single source line into rows no wider than width.

    Only whitespace left at the end of a row may run past width.

    Args:
        line: One line of text, optionally ending with a newline.
        width: Maximum row width in columns.

    Returns:
        Rows in display order. The line terminator stays on the last row and
        an empty line still gives one row.
    """
    width = max(width, 1)
    ending = _terminator(line)
    body = line[: len(line) - len(ending)]

    rows = []
    row, col = "", 0
    for token in _TOKEN_RE.findall(body):
        token_width = display_width(token, col)
        if token.isspace() or col + token_width <= width:
            row += token
            col += token_width
            continue

        if _has_text(row):
            rows.append(row)
            row, col = "", 0

        # Too wide for a row of its own, break between characters
        visible = False
        for unit in _UNIT_RE.findall(token):
            unit_width = display_width(unit, col)
            if visible and col + unit_width > width:
                rows.append(row)
                row, col, visible = "", 0, False
            row += unit
            col += unit_width
            visible = visible or unit_width > 0

    rows.append(row + ending)
    return rows


def fit_row(row: str, width: int) -> str:
    """Drop trailing whitespace of a row that would run past width.

    The line terminator, if any, is kept.
    """
    ending = _terminator(row)
    body = row[: len(row) - len(ending)]
    if display_width(body) <= max(width, 1):
        return row

    kept = body.rstrip()
    col = display_width(kept)
    for ch in body[len(kept):]:
        ch_width = char_display_width(ch, col)
        if col + ch_width > width:
            break
        kept += ch
        col += ch_width
    return kept + ending


def wrap(text: str, width: int) -> str:
    """Wrap multi-line text for display, separating rows with newlines."""
    return "".join(
        "\n".join(fit_row(row, width) for row in wrap_line(line, width))
        for line in split_lines(text)
    )


def line_count(text: str) -> int:
    """Number of lines text occupies once printed."""
    return len(split_lines(text))
