"""
TypeScript / JavaScript emitter.

Import declarations are written with named items first and namespace and
default bindings after them:

    import { foo, baz as bar }, * as myLib, myLibsDefault from "./lib"

Downstream consumers depend on this exact ordering.
"""

from typing import List

from ..shared.errors import UnsupportedNodeError
from ..shared.nodes import (
    Comment, Default, ImportDeclaration, Item, Namespace, UnknownExpression,
)
from ..utils.config import (
    AS_KEYWORD, BLOCK_COMMENT_CLOSE, BLOCK_COMMENT_OPEN, EMITTED_COMMENT_PREFIX,
    FROM_KEYWORD, IMPORT_KEYWORD, LINE_TERMINATORS, NAMESPACE_MARKER,
    SPECIFIER_SEPARATOR, STATEMENT_TERMINATOR, STRING_QUOTE_CHAR,
)
from .base import Emitter


def render_item(item: Item) -> str:
    if item.is_renamed:
        return f"{item.imported} {AS_KEYWORD} {item.local}"
    return item.imported


class TypeScriptEmitter(Emitter):
    """
    Emitter for ECMAScript module syntax.

    Args:
        terminate_statements: append `;` to every import declaration
    """

    def __init__(self, terminate_statements: bool = False):
        self.terminate_statements = terminate_statements

    def visit_comment(self, node: Comment) -> str:
        if not any(ch in node.text for ch in LINE_TERMINATORS):
            return EMITTED_COMMENT_PREFIX + node.text
        # Multi-line text keeps its line breaks inside a block comment
        if BLOCK_COMMENT_CLOSE in node.text:
            raise UnsupportedNodeError(
                node, f"multi-line comment text contains {BLOCK_COMMENT_CLOSE!r}"
            )
        return BLOCK_COMMENT_OPEN + node.text + BLOCK_COMMENT_CLOSE

    def visit_unknown_expression(self, node: UnknownExpression) -> str:
        return node.text

    def visit_import_declaration(self, node: ImportDeclaration) -> str:
        if not node.specifiers:
            raise UnsupportedNodeError(node, "import declaration has no specifiers")

        items: List[str] = []
        namespaces: List[str] = []
        defaults: List[str] = []
        for spec in node.specifiers:
            if isinstance(spec, Item):
                items.append(render_item(spec))
            elif isinstance(spec, Namespace):
                namespaces.append(f"{NAMESPACE_MARKER} {AS_KEYWORD} {spec.name}")
            elif isinstance(spec, Default):
                defaults.append(spec.name)
            else:
                raise UnsupportedNodeError(node, f"unknown import specifier {spec!r}")

        others = namespaces + defaults
        source = f"{STRING_QUOTE_CHAR}{node.source}{STRING_QUOTE_CHAR}"
        if items and others:
            clause = "{ " + SPECIFIER_SEPARATOR.join(items) + " }" + SPECIFIER_SEPARATOR + SPECIFIER_SEPARATOR.join(others)
        elif items:
            clause = "{ " + SPECIFIER_SEPARATOR.join(items) + " }"
        else:
            clause = SPECIFIER_SEPARATOR.join(others)

        line = f"{IMPORT_KEYWORD} {clause} {FROM_KEYWORD} {source}"
        if self.terminate_statements:
            line += STATEMENT_TERMINATOR
        return line
