"""
Declaration Serialization to S-Expressions
==========================================

Converts declaration nodes to a canonical S-expression format for testing and
debugging, and reads that format back. This is a debug rendering: the
emitter produces the syntax-accurate text.

    (program
      (comment " hello")
      (import "developers" (namespace "daniel") (item "thorsten" "sabine"))
      (unknown "const x = 1;"))

Uses structured sexpr (nested lists + sexpdata.Symbol for form names),
then pretty-prints for readable output.
"""

import logging
from typing import Any, Iterable, List

import sexpdata

from .nodes import (
    Comment, DeclarationNode, Default, ImportDeclaration, Item, Namespace,
    UnknownExpression,
)
from .visitor import DeclarationVisitor

logger = logging.getLogger("modport.shared.serialization")


def _pretty_dumps(sexpr: Any, indent: int = 0, indent_str: str = "  ", max_line: int = 100) -> str:
    """
    Pretty-print structured sexpr. Keeps short forms on one line; breaks only when needed.
    """
    # Check Symbol before str (sexpdata.Symbol subclasses str)
    if isinstance(sexpr, sexpdata.Symbol):
        return sexpr.value()
    if isinstance(sexpr, str):
        return sexpdata.dumps(sexpr)
    if not sexpr:
        return "()"
    parts = [_pretty_dumps(e, indent + 1, indent_str, max_line) for e in sexpr]
    one_line = "(" + " ".join(parts) + ")"
    if len(one_line) <= max_line:
        return one_line
    prefix = indent_str * indent
    next_prefix = indent_str * (indent + 1)
    rest = "\n".join(next_prefix + p for p in parts[1:])
    inner = parts[0] + ("\n" + rest if rest else "")
    return f"({inner}\n{prefix})"


class DeclarationSerializer(DeclarationVisitor[list]):
    """Declaration node to structured S-expression serializer."""

    def _sym(self, s: str) -> sexpdata.Symbol:
        return sexpdata.Symbol(s)

    def serialize_to_sexpr(self, nodes: Iterable[DeclarationNode]) -> list:
        return [self._sym("program")] + [self.visit(node) for node in nodes]

    def visit_comment(self, node: Comment) -> list:
        return [self._sym("comment"), node.text]

    def visit_import_declaration(self, node: ImportDeclaration) -> list:
        return [self._sym("import"), node.source] + [self._serialize_specifier(s) for s in node.specifiers]

    def visit_unknown_expression(self, node: UnknownExpression) -> list:
        return [self._sym("unknown"), node.text]

    def generic_visit(self, node: Any) -> list:
        return [self._sym(type(node).__name__), str(node)]

    def _serialize_specifier(self, spec: Any) -> list:
        if isinstance(spec, Namespace):
            return [self._sym("namespace"), spec.name]
        if isinstance(spec, Default):
            return [self._sym("default"), spec.name]
        if isinstance(spec, Item):
            return [self._sym("item"), spec.imported, spec.local]
        return [self._sym(type(spec).__name__), str(spec)]


def serialize_nodes(nodes: Iterable[DeclarationNode], pretty: bool = True) -> str:
    """
    Serialize a declaration sequence to an S-expression string.

    Args:
        nodes: declaration nodes in textual order
        pretty: Use pretty-printed format (default True). Set False for compact single-line.
    """
    sexpr = DeclarationSerializer().serialize_to_sexpr(nodes)
    if pretty:
        return _pretty_dumps(sexpr)
    return sexpdata.dumps(sexpr)


# ============================================================================
# Deserialization
# ============================================================================

# Number of string fields after the form name
_SPECIFIER_ARITY = {"namespace": 1, "default": 1, "item": 2}
_NODE_ARITY = {"comment": 1, "unknown": 1}


def _form_name(sexpr: Any) -> str:
    if not isinstance(sexpr, list) or not sexpr or not isinstance(sexpr[0], sexpdata.Symbol):
        raise ValueError(f"expected a form, got {sexpdata.dumps(sexpr)}")
    return sexpr[0].value()


def _string_fields(sexpr: list, count: int) -> List[str]:
    fields = sexpr[1:]
    if len(fields) != count:
        raise ValueError(
            f"({sexpr[0].value()} ...) takes {count} field(s), got {len(fields)}"
        )
    for field in fields:
        if not isinstance(field, str) or isinstance(field, sexpdata.Symbol):
            raise ValueError(f"expected a string in ({sexpr[0].value()} ...), got {sexpdata.dumps(field)}")
    return fields


def _deserialize_specifier(sexpr: Any) -> Any:
    tag = _form_name(sexpr)
    if tag not in _SPECIFIER_ARITY:
        raise ValueError(f"unknown specifier form: {tag}")
    fields = _string_fields(sexpr, _SPECIFIER_ARITY[tag])
    if tag == "namespace":
        return Namespace(fields[0])
    if tag == "default":
        return Default(fields[0])
    return Item(imported=fields[0], local=fields[1])


def _deserialize_node(sexpr: Any) -> DeclarationNode:
    tag = _form_name(sexpr)
    if tag == "comment":
        return Comment(_string_fields(sexpr, _NODE_ARITY[tag])[0])
    if tag == "unknown":
        return UnknownExpression(_string_fields(sexpr, _NODE_ARITY[tag])[0])
    if tag == "import":
        (source,) = _string_fields(sexpr[:2], 1)
        return ImportDeclaration(
            source=source,
            specifiers=tuple(_deserialize_specifier(s) for s in sexpr[2:]),
        )
    raise ValueError(f"unknown declaration form: {tag}")


def deserialize_nodes(text: str) -> List[DeclarationNode]:
    """Read a `(program ...)` S-expression back into declaration nodes."""
    try:
        sexpr = sexpdata.loads(text, nil=None, true=None, string_to=str)
    except Exception as e:
        raise ValueError(f"malformed S-expression: {e}") from e
    if _form_name(sexpr) != "program":
        raise ValueError("expected a (program ...) form")
    logger.debug("deserialized %d declaration forms", len(sexpr) - 1)
    return [_deserialize_node(form) for form in sexpr[1:]]
