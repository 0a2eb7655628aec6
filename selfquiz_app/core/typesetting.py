"""Best-effort highlighting and math typesetting over freshly rendered nodes.

The real engines (highlight.js and MathJax) run in the browser. On the server
side an engine only marks the nodes it was handed; the page script picks the
marks up once the markup lands in the document. Engines are optional and any
failure they raise is logged and swallowed so that rendering always
completes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Protocol

from bs4 import Tag

logger = logging.getLogger(__name__)

HIGHLIGHT_ATTRIBUTE = "data-highlight"
TYPESET_ATTRIBUTE = "data-typeset"


class TypesettingEngine(Protocol):
    name: str

    def process(self, nodes: list[Tag]) -> None:
        ...


class HighlightJsEngine:
    """Marks ``<code>`` nodes for highlight.js."""

    name = "highlight.js"

    def process(self, nodes: list[Tag]) -> None:
        for node in nodes:
            node[HIGHLIGHT_ATTRIBUTE] = "pending"


class MathJaxEngine:
    """Marks subtrees for a scoped ``MathJax.typesetPromise`` call."""

    name = "MathJax"

    def process(self, nodes: list[Tag]) -> None:
        for node in nodes:
            node[TYPESET_ATTRIBUTE] = "pending"


class TypesettingTrigger:
    """Hands rendered nodes to the optional highlighting and math engines."""

    def __init__(
        self,
        highlighter: TypesettingEngine | None = None,
        math_engine: TypesettingEngine | None = None,
    ) -> None:
        self.highlighter = highlighter
        self.math_engine = math_engine

    @classmethod
    def with_default_engines(cls) -> TypesettingTrigger:
        return cls(highlighter=HighlightJsEngine(), math_engine=MathJaxEngine())

    def run_batch(self, container: Tag) -> None:
        """Highlight every code block in ``container`` and typeset it as a whole."""
        if self.highlighter is not None:
            self._dispatch(self.highlighter, container.select("pre code"))
        self._typeset([container])

    def typeset_nodes(self, nodes: Iterable[Tag]) -> None:
        """Typeset only ``nodes``, e.g. an explanation slot that was just filled."""
        self._typeset([node for node in nodes if node is not None])

    def _typeset(self, nodes: list[Tag]) -> None:
        if self.math_engine is None:
            logger.warning("Math typesetting engine not available; formulas stay unrendered")
            return
        self._dispatch(self.math_engine, nodes)

    @staticmethod
    def _dispatch(engine: TypesettingEngine, nodes: list[Tag]) -> None:
        if not nodes:
            return
        try:
            engine.process(nodes)
        except Exception:
            logger.exception("%s failed to process %d node(s)", engine.name, len(nodes))
