"""Tests for the unified tree builder."""

from selector_extractor.core.models import Attribute, Element, Other
from selector_extractor.core.tree import build_tree


def _convert(node):
    name, children = node
    if name.startswith("#"):
        return Other(kind=name)
    return Element(name=name, attributes=(Attribute(name="id", value=name),))


def _children(node):
    return node[1]


def test_build_tree_keeps_child_order() -> None:
    """Children are attached in source order at every depth."""
    source = ("root", [("a", [("a1", []), ("a2", [])]), ("#text", []), ("b", [])])

    tree = build_tree(source, _convert, _children)

    assert isinstance(tree, Element)
    assert [getattr(c, "name", None) for c in tree.children] == ["a", None, "b"]
    assert [c.name for c in tree.children[0].children] == ["a1", "a2"]
    assert tree.children[1] == Other(kind="#text")


def test_build_tree_does_not_descend_into_other_nodes() -> None:
    """Children of non-element nodes are dropped."""
    source = ("#comment", [("hidden", [])])

    tree = build_tree(source, _convert, _children)

    assert tree == Other(kind="#comment")


def test_build_tree_deep_input() -> None:
    """Very deep sources convert without hitting the recursion limit."""
    source = ("leaf", [])
    for i in range(5000):
        source = (f"n{i}", [source])

    tree = build_tree(source, _convert, _children)

    depth = 0
    while tree.children:
        tree = tree.children[0]
        depth += 1
    assert depth == 5000
    assert tree.name == "leaf"
