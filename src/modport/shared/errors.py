"""
Error Reporting

Diagnostics collected by the driver and the exception classes raised by the
recognizer and the emitter.
"""

import os
import sys
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from .source_location import SourceLocation
from ..utils.config import (
    COLOR_ENV_VAR,
    ERROR_UNRECOGNIZED_INPUT,
    ERROR_UNRENDERABLE_NODE,
    ERROR_UNSUPPORTED_LANGUAGE,
)


# ---------------------------------------------------------------------------
# ANSI color helpers (disabled when NO_COLOR is set)
# ---------------------------------------------------------------------------

def _use_color() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    explicit = os.environ.get(COLOR_ENV_VAR, "").lower()
    if explicit in ("0", "false", "no", "never"):
        return False
    return True

_BOLD   = "\033[1m"
_RED    = "\033[31m"
_BLUE   = "\033[34m"
_CYAN   = "\033[36m"
_RESET  = "\033[0m"

def _style(text: str, *codes: str, color: bool = True) -> str:
    if not color:
        return text
    prefix = "".join(codes)
    return f"{prefix}{text}{_RESET}" if prefix else text


# ---------------------------------------------------------------------------
# Error dataclass
# ---------------------------------------------------------------------------

@dataclass
class Error:
    """Recognition, emission or driver diagnostic."""
    message: str
    location: Optional[SourceLocation]
    code: Optional[str] = None
    help: Optional[str] = None
    note: Optional[str] = None
    label: Optional[str] = None


# ---------------------------------------------------------------------------
# Formatting engine
# ---------------------------------------------------------------------------

def _format_diagnostic(
    error: Error,
    source_files: Dict[str, str],
    color: bool = False,
) -> str:
    """
    Render a single diagnostic in rustc style.

    Example output (plain, no color)::

        error[E0101]: unrecognized input
         --> main.ts:2:1
          |
        2 | export const x = 1;
          | ^^^^^^ no comment or import declaration starts here
          |
          = help: run in passthrough mode to keep unrecognized text verbatim
    """
    out: List[str] = []

    code_str = f"[{error.code}]" if error.code else ""
    out.append(
        _style(f"error{code_str}", _BOLD, _RED, color=color)
        + _style(f": {error.message}", _BOLD, color=color)
    )

    if error.location is None:
        _append_annotations(out, error, 1, color)
        return "\n".join(out)

    loc = error.location
    source = source_files.get(loc.file)
    if source is None:
        out.append(_style(" --> ", _BOLD, _BLUE, color=color) + str(loc))
        _append_annotations(out, error, 1, color)
        return "\n".join(out)

    src_lines = source.split("\n")
    idx = loc.line - 1
    code_line = src_lines[idx].rstrip("\r") if 0 <= idx < len(src_lines) else ""
    gw = max(len(str(loc.line)), 1)

    out.append(_style(" " * gw + "--> ", _BOLD, _BLUE, color=color) + str(loc))
    out.append(_style(" " * (gw + 1) + "|", _BOLD, _BLUE, color=color))
    out.append(_style(str(loc.line).rjust(gw) + " | ", _BOLD, _BLUE, color=color) + code_line)

    col_start = max(loc.column, 1) - 1
    if loc.end_line == loc.line and loc.end_column > loc.column:
        span_len = loc.end_column - loc.column
    else:
        span_len = _guess_span(code_line, col_start)
    carets = " " * col_start + "^" * max(1, span_len)
    label_suffix = f" {error.label}" if error.label else ""
    out.append(
        _style(" " * (gw + 1) + "| ", _BOLD, _BLUE, color=color)
        + _style(carets + label_suffix, _BOLD, _RED, color=color)
    )

    _append_annotations(out, error, gw, color)
    return "\n".join(out)


def _guess_span(code_line: str, col_start: int) -> int:
    """Guess token length when end_column is unavailable."""
    if col_start >= len(code_line):
        return 1
    length = 0
    for ch in code_line[col_start:]:
        if ch in (" ", "\t", ";", ",", "}", '"'):
            break
        length += 1
    return max(1, length)


def _append_annotations(
    out: List[str],
    error: Error,
    gw: int,
    color: bool,
) -> None:
    if not (error.help or error.note):
        return
    out.append(_style(" " * (gw + 1) + "|", _BOLD, _BLUE, color=color))
    pad = " " * (gw + 1)
    if error.help:
        out.append(
            _style(f"{pad}= ", _BOLD, _CYAN, color=color)
            + _style("help: ", _BOLD, color=color)
            + error.help
        )
    if error.note:
        out.append(
            _style(f"{pad}= ", _BOLD, _CYAN, color=color)
            + _style("note: ", _BOLD, color=color)
            + error.note
        )


# ---------------------------------------------------------------------------
# ErrorReporter
# ---------------------------------------------------------------------------

class ErrorReporter:
    """Collects diagnostics for one driver run and renders them."""

    def __init__(self, source_files: Optional[Dict[str, str]] = None):
        self.source_files = source_files if source_files is not None else {}
        self.errors: List[Error] = []

    def report_error(
        self,
        message: str,
        location: Optional[SourceLocation],
        code: Optional[str] = None,
        help: Optional[str] = None,
        note: Optional[str] = None,
        label: Optional[str] = None,
    ) -> None:
        self.errors.append(Error(
            message=message,
            location=location,
            code=code,
            help=help,
            note=note,
            label=label,
        ))

    def format_error(self, error: Error, color: Optional[bool] = None) -> str:
        use_color = color if color is not None else _use_color()
        return _format_diagnostic(error, self.source_files, color=use_color)

    def format_all_errors(self, color: Optional[bool] = None) -> str:
        parts = [self.format_error(e, color=color) for e in self.errors]
        use_color = color if color is not None else _use_color()
        count = len(self.errors)
        summary = f"aborting due to {count} previous error{'s' if count != 1 else ''}"
        parts.append(
            _style("error", _BOLD, _RED, color=use_color)
            + _style(f": {summary}", _BOLD, color=use_color)
        )
        return "\n\n".join(parts)

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def print_errors(self) -> None:
        if self.errors:
            print(self.format_all_errors(), file=sys.stderr)


# ============================================================================
# Exception Classes
# ============================================================================

class ModportError(Exception):
    """Base exception for all modport errors"""
    code: Optional[str] = None

    def __init__(self, message: str, location: Optional[SourceLocation] = None):
        super().__init__(message)
        self.message = message
        self.location = location

    def __str__(self):
        if self.location:
            return f"{self.message} at {self.location}"
        return self.message


class UnsupportedLanguageError(ModportError):
    """No recognizer or emitter is registered for the requested language."""
    code = ERROR_UNSUPPORTED_LANGUAGE

    def __init__(self, language: Any, role: str = ""):
        self.language = language
        self.role = role
        what = f" for {role}" if role else ""
        super().__init__(f"unsupported language{what}: {language!r}")


class RecognitionError(ModportError):
    """No recognizer rule matches at position."""
    code = ERROR_UNRECOGNIZED_INPUT

    def __init__(self, message: str, position: int, location: SourceLocation, excerpt: str = ""):
        super().__init__(message, location)
        self.position = position
        self.excerpt = excerpt

    def __str__(self):
        base = f"{self.message} at {self.location}"
        return f"{base}: {self.excerpt!r}" if self.excerpt else base


class UnsupportedNodeError(ModportError):
    """A node has no rendering rule (or a visitor has no visit_* method for it)."""
    code = ERROR_UNRENDERABLE_NODE

    def __init__(self, node: Any, reason: str = ""):
        self.node = node
        self.reason = reason or f"no rule for {type(node).__name__}"
        super().__init__(f"{self.reason}: {node}")


class EmissionError(ModportError):
    """Every node of one emit() call that could not be rendered."""
    code = ERROR_UNRENDERABLE_NODE

    def __init__(self, failures: Sequence[UnsupportedNodeError]):
        self.failures = list(failures)
        super().__init__(
            "could not generate code for nodes: "
            + ", ".join(str(f) for f in self.failures)
        )

    @property
    def nodes(self) -> List[Any]:
        return [f.node for f in self.failures]


class ModportImplementationError(Exception):
    """
    Error in modport's own code (not in the user's input).

    Never use this for unrecognized input - use RecognitionError instead.
    """
    def __init__(self, message: str, error_code: str = "E9999"):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self):
        return f"[{self.error_code}] {self.message}"
