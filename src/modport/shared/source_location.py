"""
Source Location (Span)

Position of a recognized or unrecognized region in the input text.
"""

from dataclasses import dataclass

from ..utils.text import line_and_column


@dataclass(frozen=True)
class SourceLocation:
    """
    Source location.

    - File, line, column (+ optional start/end character offsets)
    - Code snippets extracted from the source text when needed (not stored here)
    - Immutable (frozen) for hashability
    """
    file: str
    line: int
    column: int
    start: int = 0
    end: int = 0
    end_line: int = 0
    end_column: int = 0

    @classmethod
    def from_offsets(cls, text: str, start: int, end: int = 0, file: str = "<input>") -> "SourceLocation":
        """Build a location for text[start:end] (end defaults to start + 1)."""
        if end <= start:
            end = start + 1
        line, column = line_and_column(text, start)
        end_line, end_column = line_and_column(text, end)
        return cls(
            file=file,
            line=line,
            column=column,
            start=start,
            end=end,
            end_line=end_line,
            end_column=end_column,
        )

    def __str__(self) -> str:
        """Format as file:line:column"""
        return f"{self.file}:{self.line}:{self.column}"
