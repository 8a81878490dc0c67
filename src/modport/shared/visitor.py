"""
Declaration Visitor Pattern

Design:
- Abstract base class with visit_* methods for each node type
- Type-safe (mypy can check)
- Adding a declaration variant means adding an abstract method here, which
  every concrete visitor must then implement before it can be instantiated
- Values outside the closed set go to generic_visit(), which raises
  UnsupportedNodeError
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar, TYPE_CHECKING

from .errors import UnsupportedNodeError

if TYPE_CHECKING:
    from .nodes import Comment, ImportDeclaration, UnknownExpression

T = TypeVar('T')


class DeclarationVisitor(ABC, Generic[T]):
    """
    Abstract visitor over declaration nodes.

    Usage:
        class Printer(DeclarationVisitor[str]):
            def visit_comment(self, node): return node.text
            def visit_import_declaration(self, node): return node.source
            def visit_unknown_expression(self, node): return node.text

        Printer().visit(Comment(" hi"))  # " hi"
    """

    def visit(self, node: Any) -> T:
        """Dispatch on node; values that are not declaration nodes go to generic_visit()."""
        from .nodes import DeclarationNode
        if not isinstance(node, DeclarationNode):
            return self.generic_visit(node)
        return node.accept(self)

    @abstractmethod
    def visit_comment(self, node: 'Comment') -> T:
        pass

    @abstractmethod
    def visit_import_declaration(self, node: 'ImportDeclaration') -> T:
        pass

    @abstractmethod
    def visit_unknown_expression(self, node: 'UnknownExpression') -> T:
        pass

    def generic_visit(self, node: Any) -> T:
        raise UnsupportedNodeError(node)
