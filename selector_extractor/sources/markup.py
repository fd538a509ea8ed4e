"""HTML tree source using Selectolax's Lexbor backend."""

from __future__ import annotations

from collections.abc import Iterator

from selectolax.lexbor import LexborHTMLParser, LexborNode

from selector_extractor.config.constants import Mode, TraversalOrder
from selector_extractor.core.models import Attribute, Element, Node, Other
from selector_extractor.core.tree import build_tree


def _convert(node: LexborNode) -> Node:
    # Text, comment and doctype nodes are not elements
    if not node.is_element_node:
        return Other(kind=node.tag or "unknown")

    attributes = tuple(
        Attribute(name=name, value=value)
        for name, value in node.attributes.items()
    )
    return Element(name=node.tag, attributes=attributes)


def _children(node: LexborNode) -> Iterator[LexborNode]:
    return node.iter(include_text=True)


def _top_level(tree: LexborHTMLParser) -> list[LexborNode]:
    """Document element plus any sibling doctype/comment nodes."""
    node = tree.root

    if node is None:
        return []

    while node.prev is not None:
        node = node.prev

    nodes: list[LexborNode] = []
    while node is not None:
        nodes.append(node)
        node = node.next

    return nodes


class MarkupSource:
    """
    Tree source for HTML documents.

    The HTML parser is lenient: malformed or partial markup is repaired
    into a document tree instead of raising.
    """

    mode: Mode = "markup"
    order: TraversalOrder = "level"

    def roots(self, contents: str) -> list[Node]:
        """
        Parse markup and return the document's top-level nodes.

        Args:
            contents: Raw HTML text

        Returns:
            Unified nodes for the top level of the parsed document
        """
        tree = LexborHTMLParser(contents)
        return [build_tree(node, _convert, _children) for node in _top_level(tree)]
