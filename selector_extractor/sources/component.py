"""
JSX component tree source using tree-sitter.

This module provides:
- Parsing of JavaScript modules with the JSX-capable grammar
- Discovery of JSX elements returned by named-exported function declarations
- Conversion of those JSX elements into the unified tree
- ParseError reporting with the position of the first syntax error
"""

from __future__ import annotations

import html
import re

import tree_sitter_javascript
from tree_sitter import Language, Node as TSNode, Parser

from selector_extractor.config.constants import Mode, TraversalOrder
from selector_extractor.core.errors import ParseError
from selector_extractor.core.models import Attribute, Element, Node, Other
from selector_extractor.core.tree import build_tree
from selector_extractor.utils.logging import get_logger

logger = get_logger(__name__)

JS_LANGUAGE = Language(tree_sitter_javascript.language())
"""JavaScript grammar (JSX included), shared by all parsers."""

_FUNCTION_DECLARATIONS = frozenset(
    {"function_declaration", "generator_function_declaration"},
)
_JSX_ELEMENTS = frozenset({"jsx_element", "jsx_self_closing_element"})
_JSX_TAGS = frozenset({"jsx_opening_element", "jsx_closing_element"})

_JS_ESCAPE = re.compile(
    r"\\(?:u\{([0-9a-fA-F]+)\}|u([0-9a-fA-F]{4})|x([0-9a-fA-F]{2})|(\r\n|[\s\S]))",
)
_JS_SINGLE_ESCAPES = {
    "n": "\n", "t": "\t", "r": "\r", "b": "\b", "f": "\f", "v": "\v", "0": "\0",
}
_JS_LINE_CONTINUATIONS = frozenset({"\r\n", "\n", "\r", "\u2028", "\u2029"})




# ==== SYNTAX HELPERS ==== #

def _text(node: TSNode) -> str:
    return (node.text or b"").decode("utf-8")


def _first_error(root: TSNode) -> TSNode | None:
    """Locate the first ERROR or missing node in source order."""
    stack = [root]

    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node
        # Only subtrees that contain an error are worth descending into
        stack.extend(
            child for child in reversed(node.children)
            if child.has_error or child.is_missing
        )

    return None


def _char_column(source: bytes, offset: int) -> int:
    """1-based character column of a byte offset (tree-sitter counts bytes)."""
    line_start = source.rfind(b"\n", 0, offset) + 1
    return len(source[line_start:offset].decode("utf-8", errors="replace")) + 1


def _raise_parse_error(root: TSNode, source: bytes) -> None:
    error = _first_error(root)

    if error is None:
        raise ParseError("component", detail="invalid syntax")

    row = error.start_point[0]
    column = _char_column(source, error.start_byte)
    if error.is_missing:
        detail = f"missing {error.type}"
    else:
        snippet = _text(error).strip().splitlines()
        detail = f"unexpected {snippet[0][:40]!r}" if snippet else "unexpected token"

    raise ParseError("component", detail=detail, line=row + 1, column=column)




# ==== MODULE STRUCTURE ==== #

def _exported_function_body(statement: TSNode) -> TSNode | None:
    """
    Body of `export function f() {...}`, or None for any other statement.

    Default exports are excluded even when they export a function
    declaration.
    """
    if statement.type != "export_statement":
        return None

    if any(child.type == "default" for child in statement.children):
        return None

    declaration = statement.child_by_field_name("declaration")
    if declaration is None or declaration.type not in _FUNCTION_DECLARATIONS:
        return None

    return declaration.child_by_field_name("body")


def _returned_element(statement: TSNode) -> TSNode | None:
    """JSX element returned by a `return` statement, parentheses removed."""
    if statement.type != "return_statement":
        return None

    argument = _first_named(statement)
    while argument is not None and argument.type == "parenthesized_expression":
        argument = _first_named(argument)

    if argument is None or _opening_tag(argument) is None:
        return None

    return argument


def _opening_tag(node: TSNode) -> TSNode | None:
    """
    Opening tag of a JSX element, or None for anything else.

    Fragments parse as elements whose opening tag has no name; they are
    not elements.
    """
    if node.type not in _JSX_ELEMENTS:
        return None

    opening = node if node.type == "jsx_self_closing_element" else node.child_by_field_name("open_tag")
    if opening is None or opening.child_by_field_name("name") is None:
        return None

    return opening


def _first_named(node: TSNode) -> TSNode | None:
    for child in node.named_children:
        if child.type != "comment":
            return child
    return None




# ==== JSX CONVERSION ==== #

def _unescape_js(raw: str) -> str:
    """
    Decode JavaScript string escapes (\\n, \\x41, \\u0041, \\u{1F600}, ...).

    Surrogate pairs written as two \\u escapes are joined; lone surrogates
    are kept as they are.
    """

    def _replace(match: re.Match[str]) -> str:
        braced, four, two, other = match.groups()
        digits = braced or four or two
        if digits is not None:
            code = int(digits, 16)
            return chr(code) if code <= 0x10FFFF else match.group(0)
        if other in _JS_LINE_CONTINUATIONS:
            return ""
        return _JS_SINGLE_ESCAPES.get(other, other)

    decoded = _JS_ESCAPE.sub(_replace, raw)
    return decoded.encode("utf-16", "surrogatepass").decode("utf-16", "surrogatepass")


def _literal_value(value: TSNode) -> str | None:
    """
    Literal string of an attribute value.

    Accepts "a", {"a"} and {`a`} (no substitutions); anything computed
    has no literal value. JSX attribute strings decode HTML entities and
    keep backslashes; braced JavaScript literals decode JS escapes.
    """
    if value.type == "string":
        return html.unescape(_text(value)[1:-1])

    if value.type != "jsx_expression":
        return None

    inner = _first_named(value)
    if inner is None or inner.next_named_sibling is not None:
        return None

    if inner.type == "string":
        return _unescape_js(_text(inner)[1:-1])

    if inner.type == "template_string" and not any(
        child.type == "template_substitution" for child in inner.named_children
    ):
        return _unescape_js(_text(inner)[1:-1])

    return None


def _attribute(node: TSNode) -> Attribute:
    parts = node.named_children
    value = _literal_value(parts[1]) if len(parts) > 1 else None
    return Attribute(name=_text(parts[0]), value=value)


def _convert(node: TSNode) -> Node:
    opening = _opening_tag(node)

    if opening is None:
        return Other(kind=node.type)

    name = opening.child_by_field_name("name")
    attributes = tuple(
        _attribute(child)
        for child in opening.named_children
        if child.type == "jsx_attribute"
    )
    return Element(name=_text(name), attributes=attributes)


def _children(node: TSNode) -> list[TSNode]:
    if node.type != "jsx_element":
        return []

    return [child for child in node.named_children if child.type not in _JSX_TAGS]




# ==== SOURCE ==== #

class ComponentSource:
    """
    Tree source for JavaScript modules containing JSX.

    Only JSX returned directly from a named-exported function declaration
    is considered; everything else in the module is ignored.
    """

    mode: Mode = "component"
    order: TraversalOrder = "pre"

    def __init__(self) -> None:
        self._parser = Parser(JS_LANGUAGE)

    def roots(self, contents: str) -> list[Node]:
        """
        Parse a module and return the exported components' JSX roots.

        Args:
            contents: Raw JavaScript/JSX source text

        Returns:
            Unified nodes, one per qualifying return statement, in source order

        Raises:
            ParseError: If the text is not valid JavaScript/JSX
        """
        source = contents.encode("utf-8")
        tree = self._parser.parse(source)
        module = tree.root_node

        if module.has_error:
            _raise_parse_error(module, source)

        roots: list[Node] = []

        for statement in module.named_children:
            body = _exported_function_body(statement)
            if body is None:
                continue
            for inner in body.named_children:
                element = _returned_element(inner)
                if element is not None:
                    roots.append(build_tree(element, _convert, _children))

        logger.debug(f"Found {len(roots)} exported JSX root(s)")
        return roots
