"""
Selector walker over the unified tree.

This module provides:
- Normalization of class and id attribute values into selector strings
- A single traversal routine used for both source modes, in either
  level order (markup) or depth-first pre-order (component)

Traversal is iterative and the accumulator belongs to one call, so results
never leak between extractions.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from selector_extractor.config.constants import (
    CLASS_ATTRIBUTES,
    ID_ATTRIBUTES,
    SELECTOR_PREFIXES,
    SelectorKind,
    TraversalOrder,
)
from selector_extractor.core.models import Element, Node, Other

# ==== NORMALIZATION ==== #

def class_selector(value: str) -> str | None:
    """
    Build one combined class selector from a class attribute value.

    Args:
        value: Raw attribute value, possibly several whitespace-separated
            class names

    Returns:
        Selector string, or None when the value holds no class name

    Example:
        class_selector("container  container-fluid") -> ".container.container-fluid"
    """
    tokens = value.split()

    if not tokens:
        return None

    return SELECTOR_PREFIXES["class"] + ".".join(tokens)




def id_selector(value: str) -> str | None:
    """
    Build an id selector; the value is passed through untouched.

    Example:
        id_selector("global-header") -> "#global-header"
    """
    if not value:
        return None

    return SELECTOR_PREFIXES["id"] + value




def element_selectors(element: Element, kind: SelectorKind) -> list[str]:
    """
    Selectors contributed by a single element, in attribute order.

    Attributes without a literal value, or with an empty one,
    contribute nothing.
    """
    if kind == "class":
        names, normalize = CLASS_ATTRIBUTES, class_selector
    else:
        names, normalize = ID_ATTRIBUTES, id_selector

    selectors: list[str] = []

    for attribute in element.attributes:
        if attribute.name not in names or attribute.value is None:
            continue
        selector = normalize(attribute.value)
        if selector is not None:
            selectors.append(selector)

    return selectors




# ==== TRAVERSAL ==== #

def _walk_levels(roots: Iterable[Node], kind: SelectorKind) -> list[str]:
    """Emit every element of a depth, then move on to their children."""
    selectors: list[str] = []
    level: list[Node] = list(roots)

    while True:
        elements = [node for node in level if isinstance(node, Element)]
        # Other nodes end the descent along their branch
        if not elements:
            break

        for element in elements:
            selectors.extend(element_selectors(element, kind))

        level = [child for element in elements for child in element.children]

    return selectors




def _walk_preorder(roots: Sequence[Node], kind: SelectorKind) -> list[str]:
    """Emit an element, then its subtree, left to right."""
    selectors: list[str] = []
    stack: list[Node] = list(reversed(roots))

    while stack:
        node = stack.pop()
        if isinstance(node, Other):
            continue
        selectors.extend(element_selectors(node, kind))
        stack.extend(reversed(node.children))

    return selectors




def walk(
    roots: Sequence[Node],
    kind: SelectorKind,
    order: TraversalOrder,
) -> list[str]:
    """
    Collect selector strings of one kind from a unified tree.

    Args:
        roots: Root nodes produced by a source adapter
        kind: Selector kind to collect ('class' or 'id')
        order: 'level' for breadth-by-depth order, 'pre' for depth-first
            pre-order

    Returns:
        New list of selector strings, duplicates preserved, unsorted

    Raises:
        ValueError: If order is not a known traversal order
    """
    if order == "level":
        return _walk_levels(roots, kind)

    if order == "pre":
        return _walk_preorder(roots, kind)

    raise ValueError(f"Unknown traversal order: {order!r}")
