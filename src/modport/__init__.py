"""
modport: recognize ECMAScript import declarations and comments, and emit
them again in a target syntax.

    >>> from modport import Language, recognize, emit
    >>> nodes, consumed = recognize(Language.TYPESCRIPT, 'import * as fs from "fs";')
    >>> emit(Language.TYPESCRIPT, nodes)
    'import * as fs from "fs"'
"""

from .shared import (
    Language, SourceLocation,
    DeclarationNode, Declaration, Comment, ImportDeclaration, UnknownExpression,
    ImportSpecifier, Namespace, Default, Item, DeclarationVisitor,
    ModportError, UnsupportedLanguageError, RecognitionError, UnsupportedNodeError,
    EmissionError, ErrorReporter, serialize_nodes, deserialize_nodes,
)
from .frontend.recognizer import Recognition, recognize, recognize_prefix
from .backends.codegen import emit
from .compiler.driver import RecoveryMode, TranspileDriver, TranspileResult, transpile

__version__ = "0.1.0"

__all__ = [
    "Language", "SourceLocation",
    "DeclarationNode", "Declaration", "Comment", "ImportDeclaration", "UnknownExpression",
    "ImportSpecifier", "Namespace", "Default", "Item", "DeclarationVisitor",
    "ModportError", "UnsupportedLanguageError", "RecognitionError", "UnsupportedNodeError",
    "EmissionError", "ErrorReporter", "serialize_nodes", "deserialize_nodes",
    "Recognition", "recognize", "recognize_prefix", "emit",
    "RecoveryMode", "TranspileDriver", "TranspileResult", "transpile",
]
