"""
Extractor facade binding a source mode to its tree source.

This module provides:
- The TreeSource protocol both source adapters implement
- Extractor, the entry point for class and id extraction
- create_extractor, a factory mirroring the public construction API
"""

from __future__ import annotations

from typing import Protocol

from selector_extractor.config.constants import Mode, SelectorKind, TraversalOrder
from selector_extractor.core.models import ExtractionResult, Node
from selector_extractor.core.walker import walk
from selector_extractor.sources.component import ComponentSource
from selector_extractor.sources.markup import MarkupSource
from selector_extractor.utils.logging import get_logger

logger = get_logger(__name__)




# ==== TREE SOURCE PROTOCOL ==== #

class TreeSource(Protocol):
    """Turns raw text of one dialect into unified tree roots."""

    mode: Mode
    order: TraversalOrder

    def roots(self, contents: str) -> list[Node]:
        ...




def _make_source(mode: Mode) -> TreeSource:
    if mode == "markup":
        return MarkupSource()

    if mode == "component":
        return ComponentSource()

    raise ValueError(f"Unknown mode: {mode!r} (expected 'markup' or 'component')")




# ==== EXTRACTOR ==== #

class Extractor:
    """
    Extracts class and id selectors from markup or component source.

    The mode is fixed for the instance's lifetime. Every call parses its
    input afresh and returns a new list, so calls never see results of
    earlier calls.

    Example:
        extractor = Extractor("markup")
        extractor.extract_class_name('<div class="a b"></div>')
        # ['.a.b']
    """

    def __init__(self, mode: Mode) -> None:
        self._source = _make_source(mode)

    @property
    def mode(self) -> Mode:
        return self._source.mode

    def _collect(self, contents: str, kind: SelectorKind) -> list[str]:
        roots = self._source.roots(contents)
        selectors = walk(roots, kind, self._source.order)
        logger.debug(f"Extracted {len(selectors)} {kind} selector(s) in {self.mode} mode")
        return selectors

    def extract_class_name(self, contents: str) -> list[str]:
        """
        Extract class selectors in traversal order.

        Args:
            contents: Raw source text in this extractor's dialect

        Returns:
            Selectors such as '.list' or '.article.title', duplicates kept

        Raises:
            ParseError: If contents is not valid for the configured mode
        """
        return self._collect(contents, "class")

    def extract_id(self, contents: str) -> list[str]:
        """
        Extract id selectors in traversal order.

        Args:
            contents: Raw source text in this extractor's dialect

        Returns:
            Selectors such as '#global-header', values passed through unchanged

        Raises:
            ParseError: If contents is not valid for the configured mode
        """
        return self._collect(contents, "id")

    def extract(self, contents: str) -> ExtractionResult:
        """
        Extract both selector kinds from a single parse.

        Raises:
            ParseError: If contents is not valid for the configured mode
        """
        roots = self._source.roots(contents)
        order = self._source.order
        return ExtractionResult(
            class_names=walk(roots, "class", order),
            ids=walk(roots, "id", order),
        )




def create_extractor(mode: Mode) -> Extractor:
    """Create an Extractor for the given mode ('markup' or 'component')."""
    return Extractor(mode)
