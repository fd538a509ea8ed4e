"""
Configuration constants and type aliases for the selector extractor.

This module defines:
- Type literals for source modes, selector kinds and traversal orders
- Attribute names inspected for each selector kind
- File extension to mode mapping used by the CLI
- Default resource limits
"""

from __future__ import annotations

from typing import Literal

# ==== TYPE DEFINITIONS ==== #

Mode = Literal["markup", "component"]
"""
Source dialect an extractor is bound to.

- 'markup': HTML documents, parsed with selectolax
- 'component': JavaScript modules with JSX, parsed with tree-sitter
"""


RunMode = Literal["auto", "markup", "component"]
"""
Mode selection for file-based runs.

- 'auto': pick the mode from each file's extension
- 'markup' / 'component': force one mode for every file
"""


SelectorKind = Literal["class", "id"]
"""
Kind of selector being collected.

- 'class': `.`-prefixed class selectors
- 'id': `#`-prefixed id selectors
"""


TraversalOrder = Literal["level", "pre"]
"""
Order in which the walker visits the unified tree.

- 'level': every element of one depth before the next depth (markup)
- 'pre': depth-first, parent before children (component)
"""




# ==== ATTRIBUTE NAMES ==== #

CLASS_ATTRIBUTES: frozenset[str] = frozenset({"class", "className"})
"""Attribute names holding class lists (`className` only occurs in JSX)."""

ID_ATTRIBUTES: frozenset[str] = frozenset({"id"})
"""Attribute names holding element ids."""

SELECTOR_PREFIXES: dict[SelectorKind, str] = {"class": ".", "id": "#"}
"""Prefix emitted in front of each selector kind."""




# ==== FILE DISCOVERY ==== #

EXTENSION_MODES: dict[str, Mode] = {
    ".html": "markup",
    ".htm": "markup",
    ".xhtml": "markup",
    ".jsx": "component",
    ".js": "component",
    ".mjs": "component",
}
"""Known source file extensions and the mode used to extract them."""




# ==== RESOURCE LIMITS ==== #

DEFAULT_MAX_FILE_BYTES: int = 5 * 1024 * 1024
"""
Maximum source file size in bytes (5 MiB).

Larger files are skipped and reported instead of being parsed.
"""

MIN_MAX_FILE_BYTES: int = 1024
"""Lower clamp bound for the configurable file size limit."""

MAX_MAX_FILE_BYTES: int = 64 * 1024 * 1024
"""Upper clamp bound for the configurable file size limit."""

DEFAULT_ENCODING: str = "utf-8"
"""Encoding used to decode source files."""
