"""
Shared components: declaration model, visitor, language selector, errors.
"""

from .source_location import SourceLocation
from .errors import (
    Error, ErrorReporter, ModportError, UnsupportedLanguageError, RecognitionError,
    UnsupportedNodeError, EmissionError, ModportImplementationError,
)
from .nodes import (
    NodeType, SpecifierKind, DeclarationNode, Declaration,
    Comment, ImportDeclaration, UnknownExpression,
    ImportSpecifier, Namespace, Default, Item,
)
from .visitor import DeclarationVisitor
from .languages import Language, as_language
from .serialization import serialize_nodes, deserialize_nodes
