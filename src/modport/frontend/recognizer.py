"""
Recognizer

Turns raw text into declaration nodes with a fixed, ordered list of
text-matching rules. Each rule looks at the input at one position and
either consumes a prefix producing exactly one node, or reports no match
without committing anything.

Rule order (first match wins):
    1. single-line comment   // text
    2. multi-line comment    /* text */
    3. namespace import      import * as ns from "source";
    4. default import        import name from "source";
    5. named-item import     import { a, b as c } from "source";

Known limitations of this textual approach: no nested braces, no string
escapes, only double-quoted sources, and the first `;` after `import` ends
the statement the import rules look at.
"""

import logging
import re
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple

from ..shared.errors import RecognitionError, UnsupportedLanguageError
from ..shared.languages import Language, as_language
from ..shared.nodes import (
    Comment, Declaration, Default, ImportDeclaration, Namespace,
)
from ..shared.source_location import SourceLocation
from ..utils.config import (
    AS_KEYWORD, BLOCK_COMMENT_CLOSE, BLOCK_COMMENT_OPEN, FROM_KEYWORD, IMPORT_KEYWORD,
    LINE_COMMENT_MARKER, LINE_TERMINATORS, NAMESPACE_MARKER, STATEMENT_TERMINATOR,
    STRING_QUOTE_CHAR,
)
from ..utils.text import excerpt_at
from .specifiers import parse_specifier_list

logger = logging.getLogger("modport.frontend.recognizer")


class RuleMatch(NamedTuple):
    """One recognized node and the offset just past the text it consumed."""
    node: Declaration
    end: int


class Recognition(NamedTuple):
    """Recognized nodes in textual order and how much input they cover."""
    nodes: List[Declaration]
    consumed: int


Rule = Callable[[str, int], Optional[RuleMatch]]

_IDENT = r"[A-Za-z_$][A-Za-z0-9_$]*"
_QUOTE = re.escape(STRING_QUOTE_CHAR)
_SOURCE = rf"{_QUOTE}(?P<source>[^{_QUOTE}]*){_QUOTE}"
_AS = re.escape(AS_KEYWORD)
_FROM = re.escape(FROM_KEYWORD)

_SEPARATOR = re.compile(r"\s*")
_SINGLE_LINE_COMMENT = re.compile(rf"{re.escape(LINE_COMMENT_MARKER)}(?P<text>[^{LINE_TERMINATORS}]*)")
_MULTI_LINE_COMMENT = re.compile(
    rf"{re.escape(BLOCK_COMMENT_OPEN)}(?P<text>.*?){re.escape(BLOCK_COMMENT_CLOSE)}", re.DOTALL
)

# Statement bodies: the text between `import` and the terminating `;`
_NAMESPACE_BODY = re.compile(
    rf"\s*{re.escape(NAMESPACE_MARKER)}\s*{_AS}\s+(?P<local>{_IDENT})\s+{_FROM}\s*{_SOURCE}\s*"
)
_DEFAULT_BODY = re.compile(rf"\s*(?P<local>{_IDENT})\s+{_FROM}\s*{_SOURCE}\s*")
_NAMED_BODY = re.compile(rf"\s*\{{(?P<items>[^{{}}]*)\}}\s*{_FROM}\s*{_SOURCE}\s*")

_IDENT_CHAR = re.compile(r"[A-Za-z0-9_$]")


# ============================================================================
# Rules
# ============================================================================

def match_single_line_comment(text: str, position: int) -> Optional[RuleMatch]:
    m = _SINGLE_LINE_COMMENT.match(text, position)
    if m is None:
        return None
    return RuleMatch(Comment(m.group("text")), m.end())


def match_multi_line_comment(text: str, position: int) -> Optional[RuleMatch]:
    m = _MULTI_LINE_COMMENT.match(text, position)
    if m is None:
        return None
    return RuleMatch(Comment(m.group("text")), m.end())


def _import_statement(text: str, position: int) -> Optional[Tuple[int, int]]:
    """
    (body_start, terminator) of an import statement starting at position.

    `import` must be a whole word; the statement ends at the first `;`.
    """
    if not text.startswith(IMPORT_KEYWORD, position):
        return None
    if position > 0 and _IDENT_CHAR.match(text, position - 1):
        return None
    body_start = position + len(IMPORT_KEYWORD)
    if body_start < len(text) and _IDENT_CHAR.match(text, body_start):
        return None
    terminator = text.find(STATEMENT_TERMINATOR, body_start)
    if terminator == -1:
        return None
    return body_start, terminator


def match_namespace_import(text: str, position: int) -> Optional[RuleMatch]:
    statement = _import_statement(text, position)
    if statement is None:
        return None
    body_start, terminator = statement
    m = _NAMESPACE_BODY.fullmatch(text, body_start, terminator)
    if m is None:
        return None
    node = ImportDeclaration(
        source=m.group("source"),
        specifiers=(Namespace(m.group("local").strip()),),
    )
    return RuleMatch(node, terminator + 1)


def match_default_import(text: str, position: int) -> Optional[RuleMatch]:
    statement = _import_statement(text, position)
    if statement is None:
        return None
    body_start, terminator = statement
    m = _DEFAULT_BODY.fullmatch(text, body_start, terminator)
    if m is None:
        return None
    node = ImportDeclaration(
        source=m.group("source"),
        specifiers=(Default(m.group("local")),),
    )
    return RuleMatch(node, terminator + 1)


def match_named_import(text: str, position: int) -> Optional[RuleMatch]:
    statement = _import_statement(text, position)
    if statement is None:
        return None
    body_start, terminator = statement
    m = _NAMED_BODY.fullmatch(text, body_start, terminator)
    if m is None:
        return None
    items = parse_specifier_list(m.group("items"))
    if items is None:
        return None
    node = ImportDeclaration(source=m.group("source"), specifiers=tuple(items))
    return RuleMatch(node, terminator + 1)


# ============================================================================
# Recognizer
# ============================================================================

class ImportRecognizer:
    """
    Recognizer for ECMAScript-style comments and import declarations.

    Stateless: one instance can serve any number of calls.
    """

    rules: Tuple[Rule, ...] = (
        match_single_line_comment,
        match_multi_line_comment,
        match_namespace_import,
        match_default_import,
        match_named_import,
    )

    def match_at(self, text: str, position: int) -> Optional[RuleMatch]:
        """Try every rule in priority order at position."""
        for rule in self.rules:
            match = rule(text, position)
            if match is not None:
                logger.debug("%s matched at %d..%d", rule.__name__, position, match.end)
                return match
        return None

    def skip_separator(self, text: str, position: int) -> int:
        """Offset of the first non-whitespace character at or after position."""
        return _SEPARATOR.match(text, position).end()

    def scan(self, text: str) -> Recognition:
        """Recognize the longest prefix of text; stops at the first unmatched position."""
        nodes: List[Declaration] = []
        position = self.skip_separator(text, 0)
        while position < len(text):
            match = self.match_at(text, position)
            if match is None:
                break
            nodes.append(match.node)
            position = self.skip_separator(text, match.end)
        return Recognition(nodes, position)

    def recognize(self, text: str, source_file: str = "<input>") -> Recognition:
        """
        Recognize all of text.

        Raises RecognitionError at the first position no rule matches.
        """
        result = self.scan(text)
        if result.consumed < len(text):
            position = result.consumed
            raise RecognitionError(
                "no comment or import declaration rule matches",
                position=position,
                location=SourceLocation.from_offsets(text, position, file=source_file),
                excerpt=excerpt_at(text, position),
            )
        logger.debug("recognized %d nodes from %d characters", len(result.nodes), len(text))
        return result


_RECOGNIZERS: Dict[Language, ImportRecognizer] = {
    Language.TYPESCRIPT: ImportRecognizer(),
    Language.JAVASCRIPT: ImportRecognizer(),
}


def get_recognizer(language) -> ImportRecognizer:
    lang = as_language(language, "recognition")
    try:
        return _RECOGNIZERS[lang]
    except KeyError:
        raise UnsupportedLanguageError(language, "recognition") from None


def recognize(language, text: str, source_file: str = "<input>") -> Recognition:
    """Recognize text written in language; see ImportRecognizer.recognize()."""
    return get_recognizer(language).recognize(text, source_file)


def recognize_prefix(language, text: str) -> Recognition:
    """Recognize the longest recognizable prefix of text without failing."""
    return get_recognizer(language).scan(text)
