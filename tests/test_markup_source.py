"""Tests for the HTML tree source."""

from selector_extractor.core.models import Element, Other
from selector_extractor.core.walker import walk
from selector_extractor.sources.markup import MarkupSource


def _find(nodes, name):
    """Depth-first search for the first element with the given tag name."""
    stack = list(reversed(nodes))
    while stack:
        node = stack.pop()
        if isinstance(node, Element):
            if node.name == name:
                return node
            stack.extend(reversed(node.children))
    return None


def test_roots_start_at_document_element() -> None:
    """The html element is a top-level root."""
    roots = MarkupSource().roots("<html><body><p>Hi</p></body></html>")

    names = [node.name for node in roots if isinstance(node, Element)]
    assert names == ["html"]


def test_attributes_and_text_nodes() -> None:
    """Element attributes are kept in order; text becomes Other."""
    roots = MarkupSource().roots('<div id="main" class="a b">text<span></span></div>')
    div = _find(roots, "div")

    assert div is not None
    assert [(a.name, a.value) for a in div.attributes] == [("id", "main"), ("class", "a b")]
    assert isinstance(div.children[0], Other)
    assert isinstance(div.children[1], Element)
    assert div.children[1].name == "span"


def test_comments_are_not_elements() -> None:
    """Comment nodes never contribute selectors."""
    roots = MarkupSource().roots('<body><!-- <p class="hidden"></p> --><p class="shown"></p></body>')

    assert walk(roots, "class", "level") == [".shown"]


def test_malformed_markup_is_tolerated() -> None:
    """Unclosed tags are repaired rather than rejected."""
    roots = MarkupSource().roots('<div class="outer"><p class="inner">unclosed')

    assert walk(roots, "class", "level") == [".outer", ".inner"]


def test_attribute_names_are_lower_cased() -> None:
    """HTML has no className attribute; it is read as 'classname'."""
    roots = MarkupSource().roots('<div className="react-only" CLASS="upper"></div>')

    assert walk(roots, "class", "level") == [".upper"]


def test_valueless_and_empty_attributes() -> None:
    """Bare or empty class/id attributes contribute nothing."""
    roots = MarkupSource().roots('<div class id=""></div><p class=""></p>')

    assert walk(roots, "class", "level") == []
    assert walk(roots, "id", "level") == []


def test_source_declares_level_order() -> None:
    """Markup is walked one depth at a time."""
    assert MarkupSource.mode == "markup"
    assert MarkupSource.order == "level"


def test_doctype_and_comments_at_top_level() -> None:
    """Doctype and comment siblings of the document element are not elements."""
    roots = MarkupSource().roots('<!DOCTYPE html><!-- top --><html><body class="page"></body></html>')

    elements = [node for node in roots if isinstance(node, Element)]
    assert [node.name for node in elements] == ["html"]
    assert all(isinstance(node, Other) for node in roots if node not in elements)
    assert walk(roots, "class", "level") == [".page"]
