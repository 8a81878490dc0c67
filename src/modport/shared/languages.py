"""
Language selector shared by the recognizer, the emitter and the driver.
"""

from enum import Enum
from typing import Any, Dict

from .errors import UnsupportedLanguageError


class Language(Enum):
    """Source and target syntaxes (both use ECMAScript module imports)."""
    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"

    @classmethod
    def from_name(cls, name: str) -> "Language":
        """Resolve a language name or file-extension alias ("ts", "mjs", ...)."""
        key = name.strip().lower().lstrip(".")
        try:
            return _ALIASES[key]
        except KeyError:
            raise UnsupportedLanguageError(name) from None


_ALIASES: Dict[str, Language] = {
    "typescript": Language.TYPESCRIPT,
    "ts": Language.TYPESCRIPT,
    "tsx": Language.TYPESCRIPT,
    "mts": Language.TYPESCRIPT,
    "cts": Language.TYPESCRIPT,
    "javascript": Language.JAVASCRIPT,
    "js": Language.JAVASCRIPT,
    "jsx": Language.JAVASCRIPT,
    "mjs": Language.JAVASCRIPT,
    "cjs": Language.JAVASCRIPT,
    "ecmascript": Language.JAVASCRIPT,
}


def as_language(value: Any, role: str = "") -> Language:
    """Accept a Language or a language name; anything else is unsupported."""
    if isinstance(value, Language):
        return value
    if isinstance(value, str):
        try:
            return Language.from_name(value)
        except UnsupportedLanguageError:
            raise UnsupportedLanguageError(value, role) from None
    raise UnsupportedLanguageError(value, role)
