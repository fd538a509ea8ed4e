"""
Conversion of parser-specific trees into the unified tree.

Both source adapters describe their parser's nodes through two callables
and share this builder, so the walker only ever sees Element/Other nodes.
The conversion uses an explicit stack: document nesting depth is bounded
by memory, not by the interpreter's recursion limit.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from selector_extractor.core.models import Element, Node

SourceNode = TypeVar("SourceNode")


def build_tree(
    root: SourceNode,
    convert: Callable[[SourceNode], Node],
    children_of: Callable[[SourceNode], Iterable[SourceNode]],
) -> Node:
    """
    Convert a parser node and its descendants into the unified tree.

    Args:
        root: Parser node to start from
        convert: Maps one parser node to an Element (with empty children)
            or an Other
        children_of: Returns a parser node's children in source order;
            only called for nodes converted to Element

    Returns:
        Unified node for root, with its subtree attached
    """
    top = convert(root)
    stack: list[tuple[SourceNode, Element]] = []

    if isinstance(top, Element):
        stack.append((root, top))

    while stack:
        source, element = stack.pop()
        for child in children_of(source):
            node = convert(child)
            element.children.append(node)
            if isinstance(node, Element):
                stack.append((child, node))

    return top
