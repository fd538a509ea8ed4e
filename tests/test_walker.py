"""Tests for selector normalization and traversal."""

import pytest

from selector_extractor.core.models import Attribute, Element, Other
from selector_extractor.core.walker import (
    class_selector,
    element_selectors,
    id_selector,
    walk,
)


def _el(name: str, *children, **attrs) -> Element:
    attributes = tuple(Attribute(name=k.rstrip("_"), value=v) for k, v in attrs.items())
    return Element(name=name, attributes=attributes, children=list(children))


def _nested_tree() -> list:
    """div.a > (p.b > span.d), (p.c)"""
    return [
        _el(
            "div",
            _el("p", _el("span", class_="d"), class_="b"),
            Other(kind="-text"),
            _el("p", class_="c"),
            class_="a",
        ),
    ]


def test_class_selector_joins_tokens() -> None:
    """Class lists become one dotted selector."""
    assert class_selector("a b c") == ".a.b.c"
    assert class_selector("single") == ".single"


def test_class_selector_collapses_whitespace_runs() -> None:
    """Runs of whitespace, including newlines, become a single dot."""
    assert class_selector("  a   b\n\tc ") == ".a.b.c"


def test_class_selector_empty_values() -> None:
    """Empty or blank class values contribute nothing."""
    assert class_selector("") is None
    assert class_selector("   ") is None


def test_id_selector_passes_value_through() -> None:
    """Ids are never space-normalized."""
    assert id_selector("global-header") == "#global-header"
    assert id_selector("has space") == "#has space"
    assert id_selector("") is None


def test_element_selectors_attribute_order() -> None:
    """Both class and className count, in attribute order."""
    element = Element(
        name="div",
        attributes=(
            Attribute(name="className", value="x"),
            Attribute(name="id", value="main"),
            Attribute(name="class", value="y z"),
        ),
    )

    assert element_selectors(element, "class") == [".x", ".y.z"]
    assert element_selectors(element, "id") == ["#main"]


def test_element_selectors_skip_valueless_attributes() -> None:
    """Attributes without a literal value are ignored."""
    element = Element(
        name="div",
        attributes=(Attribute(name="class", value=None), Attribute(name="id")),
    )

    assert element_selectors(element, "class") == []
    assert element_selectors(element, "id") == []


def test_walk_preorder() -> None:
    """Pre-order visits a subtree before the next sibling."""
    assert walk(_nested_tree(), "class", "pre") == [".a", ".b", ".d", ".c"]


def test_walk_level_order() -> None:
    """Level order emits a whole depth before descending."""
    assert walk(_nested_tree(), "class", "level") == [".a", ".b", ".c", ".d"]


def test_walk_preserves_duplicates() -> None:
    """No deduplication or sorting takes place."""
    roots = [_el("p", class_="z"), _el("p", class_="a"), _el("p", class_="z")]

    assert walk(roots, "class", "pre") == [".z", ".a", ".z"]
    assert walk(roots, "class", "level") == [".z", ".a", ".z"]


def test_walk_level_order_stops_at_non_elements() -> None:
    """A level holding only non-element nodes ends the traversal."""
    roots = [Other(kind="_comment"), Other(kind="-text")]

    assert walk(roots, "class", "level") == []


def test_walk_preorder_skips_other_siblings() -> None:
    """Non-element siblings do not halt traversal of later siblings."""
    roots = [Other(kind="jsx_text"), _el("b", id="x"), Other(kind="jsx_expression"), _el("i", id="y")]

    assert walk(roots, "id", "pre") == ["#x", "#y"]


def test_walk_handles_deep_nesting() -> None:
    """Traversal depth is not limited by the recursion limit."""
    root = _el("div", class_="leaf")
    for _ in range(5000):
        root = _el("div", root)

    assert walk([root], "class", "pre") == [".leaf"]
    assert walk([root], "class", "level") == [".leaf"]


def test_walk_unknown_order() -> None:
    """Unknown traversal orders are rejected."""
    with pytest.raises(ValueError):
        walk([], "class", "post")  # type: ignore[arg-type]
