"""
Specifier List Parser

Parses the text between the braces of a named import into Item specifiers,
using a small Lark LALR grammar (specifiers.lark) and a Transformer.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from lark import Lark, Transformer, v_args
from lark.exceptions import UnexpectedInput

from ..shared.errors import ModportImplementationError
from ..shared.nodes import Item
from ..utils.config import DEFAULT_PARSER_CACHE_FILE

logger = logging.getLogger("modport.frontend.specifiers")


@v_args(inline=True)
class SpecifierTransformer(Transformer):
    """Lark parse tree -> list of Item specifiers"""

    def __default__(self, data, children, meta):
        # Every grammar rule has a method below; reaching here means the
        # grammar and the transformer drifted apart.
        raise ModportImplementationError(
            f"Missing transformer method for grammar rule '{data}'"
        )

    def start(self, *specifiers) -> List[Item]:
        return list(specifiers)

    def renamed(self, imported, _as, local) -> Item:
        return Item(imported=str(imported), local=str(local))

    def bare(self, name) -> Item:
        return Item.bare(str(name))


class SpecifierListParser:
    """
    Parser for `name`, `name as alias` lists.

    Uses Lark with caching; one instance is shared per process because the
    compiled parser is read-only after construction.
    """

    def __init__(self, cache_file: str = DEFAULT_PARSER_CACHE_FILE):
        grammar_path = Path(__file__).parent / "specifiers.lark"
        self.parser = Lark.open(
            str(grammar_path),
            start='start',
            parser='lalr',
            cache=cache_file,
            maybe_placeholders=False,
        )
        self.transformer = SpecifierTransformer()

    def parse(self, text: str) -> Optional[List[Item]]:
        """
        Parse a specifier list.

        Returns None when text is not a non-empty comma-separated list of
        specifiers; a sub-rule mismatch is a plain "no match", never an error.
        """
        try:
            tree = self.parser.parse(text)
        except UnexpectedInput as e:
            logger.debug("specifier list %r rejected: %s", text, e)
            return None
        return self.transformer.transform(tree)


@lru_cache(maxsize=None)
def get_specifier_parser() -> SpecifierListParser:
    return SpecifierListParser()


def parse_specifier_list(text: str) -> Optional[List[Item]]:
    return get_specifier_parser().parse(text)
