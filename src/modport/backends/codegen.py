"""
Target selection for code generation.
"""

from typing import Dict, Iterable, Type

from ..shared.errors import UnsupportedLanguageError
from ..shared.languages import Language, as_language
from ..shared.nodes import DeclarationNode
from .base import Emitter
from .typescript import TypeScriptEmitter

_EMITTERS: Dict[Language, Type[Emitter]] = {
    Language.TYPESCRIPT: TypeScriptEmitter,
    Language.JAVASCRIPT: TypeScriptEmitter,
}


def get_emitter(language, **options) -> Emitter:
    """Fresh emitter for language; options go to the emitter constructor."""
    lang = as_language(language, "emission")
    try:
        emitter_class = _EMITTERS[lang]
    except KeyError:
        raise UnsupportedLanguageError(language, "emission") from None
    return emitter_class(**options)


def emit(language, nodes: Iterable[DeclarationNode], **options) -> str:
    """Render nodes in language; raises EmissionError listing every failure."""
    return get_emitter(language, **options).emit(nodes)
