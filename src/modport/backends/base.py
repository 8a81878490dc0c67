"""
Emitter Interface

All target emitters render declaration nodes through the same visitor
interface and share the fail-slow emit() loop.
"""

import logging
from abc import ABC
from typing import Iterable, List

from ..shared.errors import EmissionError, UnsupportedNodeError
from ..shared.nodes import DeclarationNode
from ..shared.visitor import DeclarationVisitor
from ..utils.config import NODE_SEPARATOR

logger = logging.getLogger("modport.backends.base")


class Emitter(DeclarationVisitor[str], ABC):
    """
    Emitter interface.

    - Subclasses implement one visit_* method per declaration variant
    - A node without a rendering rule raises UnsupportedNodeError from its
      visit_* method (or from generic_visit for foreign values)
    - emit() keeps going after a failure and reports every failure together
    """

    node_separator: str = NODE_SEPARATOR

    def emit(self, nodes: Iterable[DeclarationNode]) -> str:
        """
        Render nodes, one per line, no trailing line break.

        Raises EmissionError listing every node that could not be rendered;
        no partial output is returned in that case.
        """
        rendered: List[str] = []
        failures: List[UnsupportedNodeError] = []
        for node in nodes:
            try:
                rendered.append(self.visit(node))
            except UnsupportedNodeError as e:
                logger.debug("cannot render %r: %s", node, e.reason)
                failures.append(e)
        if failures:
            raise EmissionError(failures)
        return self.node_separator.join(rendered)
