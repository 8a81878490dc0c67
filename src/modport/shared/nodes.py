"""
modport Declaration Model
Clean, minimal nodes for the only syntactic forms carried between source and target

Visitor Pattern Support:
- Every declaration node has an accept() method for polymorphic dispatch
- DeclarationVisitor declares one abstract visit_* method per variant, so a
  visitor that misses a variant cannot be instantiated
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, TypeVar, Union, TYPE_CHECKING
from typing_extensions import TypeAlias

if TYPE_CHECKING:
    from .visitor import DeclarationVisitor

T = TypeVar('T')


class NodeType(Enum):
    """Declaration node types"""
    COMMENT = "comment"
    IMPORT_DECL = "import_decl"
    UNKNOWN_EXPR = "unknown_expr"


class SpecifierKind(Enum):
    """Import specifier kinds"""
    NAMESPACE = "namespace"
    DEFAULT = "default"
    ITEM = "item"


# ============================================
# IMPORT SPECIFIERS
# ============================================

@dataclass(frozen=True)
class Namespace:
    """Binds the whole module under name (`* as name`)."""
    name: str

    @property
    def kind(self) -> SpecifierKind:
        return SpecifierKind.NAMESPACE

    def __str__(self) -> str:
        return f"Namespace({self.name})"


@dataclass(frozen=True)
class Default:
    """Binds the module's default export under name."""
    name: str

    @property
    def kind(self) -> SpecifierKind:
        return SpecifierKind.DEFAULT

    def __str__(self) -> str:
        return f"Default({self.name})"


@dataclass(frozen=True)
class Item:
    """
    Binds the named export `imported` to the local name `local`.

    Written as `imported` when both names agree, `imported as local` otherwise.
    """
    imported: str
    local: str

    @classmethod
    def bare(cls, name: str) -> Item:
        return cls(imported=name, local=name)

    @property
    def kind(self) -> SpecifierKind:
        return SpecifierKind.ITEM

    @property
    def is_renamed(self) -> bool:
        return self.imported != self.local

    def __str__(self) -> str:
        return f"Item({self.imported} -> {self.local})"


ImportSpecifier: TypeAlias = Union[Namespace, Default, Item]


# ============================================
# DECLARATION NODES
# ============================================

class DeclarationNode:
    """
    Base class for all declaration nodes.

    Subclasses outside this module are not part of the closed set; they
    dispatch to the visitor's generic_visit().
    """
    __slots__ = ()

    def accept(self, visitor: DeclarationVisitor[T]) -> T:
        return visitor.generic_visit(self)


@dataclass(frozen=True)
class Comment(DeclarationNode):
    """Comment text without its markers."""
    text: str

    @property
    def node_type(self) -> NodeType:
        return NodeType.COMMENT

    def accept(self, visitor: DeclarationVisitor[T]) -> T:
        return visitor.visit_comment(self)

    def __str__(self) -> str:
        return f"comment({self.text!r})"


@dataclass(frozen=True)
class ImportDeclaration(DeclarationNode):
    """
    Import declaration.

    source is the module path as written (not normalized). specifiers keep
    their textual order; an empty tuple is representable but never produced
    by the recognizer.
    """
    source: str
    specifiers: Tuple[ImportSpecifier, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable of specifiers but store an immutable tuple
        if not isinstance(self.specifiers, tuple):
            object.__setattr__(self, "specifiers", tuple(self.specifiers))

    @property
    def node_type(self) -> NodeType:
        return NodeType.IMPORT_DECL

    def accept(self, visitor: DeclarationVisitor[T]) -> T:
        return visitor.visit_import_declaration(self)

    def __str__(self) -> str:
        specifiers = ", ".join(str(s) for s in self.specifiers)
        return f"import(source: {self.source}, specifiers: [{specifiers}])"


@dataclass(frozen=True)
class UnknownExpression(DeclarationNode):
    """Verbatim text no rule recognized."""
    text: str

    @property
    def node_type(self) -> NodeType:
        return NodeType.UNKNOWN_EXPR

    def accept(self, visitor: DeclarationVisitor[T]) -> T:
        return visitor.visit_unknown_expression(self)

    def __str__(self) -> str:
        return f"unknown({self.text!r})"


Declaration: TypeAlias = Union[Comment, ImportDeclaration, UnknownExpression]
