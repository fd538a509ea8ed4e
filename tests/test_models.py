"""Tests for core models."""

import msgspec

from selector_extractor.core.models import (
    Attribute,
    Element,
    ExtractionResult,
    Other,
    SourceReport,
)


def test_element_defaults_are_independent() -> None:
    """Each element gets its own children list."""
    first = Element(name="div")
    second = Element(name="div")
    first.children.append(Other(kind="-text"))

    assert second.children == []
    assert first.attributes == ()


def test_attribute_without_value() -> None:
    """Valueless attributes carry None."""
    assert Attribute(name="hidden").value is None


def test_tree_nodes_encode_with_tags() -> None:
    """Unified nodes serialize with their variant tag."""
    element = Element(
        name="p",
        attributes=(Attribute(name="class", value="a"),),
        children=[Other(kind="-text")],
    )

    decoded = msgspec.json.decode(msgspec.json.encode(element))

    assert decoded["type"] == "element"
    assert decoded["attributes"] == [{"name": "class", "value": "a"}]
    assert decoded["children"] == [{"type": "other", "kind": "-text"}]


def test_result_defaults() -> None:
    """Results start empty."""
    result = ExtractionResult()
    report = SourceReport(path="x.html", mode="markup")

    assert result.class_names == [] and result.ids == []
    assert report.error is None
