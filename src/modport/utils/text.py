"""
Centralized text-position utilities.

- Single place for offset -> line/column conversion
- Line and column numbers are 1-based, offsets are 0-based
"""

from typing import Tuple

from .config import ERROR_EXCERPT_CHARS


def line_and_column(text: str, offset: int) -> Tuple[int, int]:
    """Convert a character offset into a (line, column) pair."""
    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset) + 1
    line_start = text.rfind("\n", 0, offset) + 1
    return line, offset - line_start + 1


def excerpt_at(text: str, offset: int, width: int = ERROR_EXCERPT_CHARS) -> str:
    """Remainder of the line at offset, truncated for error display."""
    rest = text[offset:]
    line_end = rest.find("\n")
    if line_end != -1:
        rest = rest[:line_end]
    rest = rest.rstrip("\r")
    if len(rest) > width:
        return rest[:width] + "..."
    return rest
