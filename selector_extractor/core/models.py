"""
Core data models and type definitions for the selector extractor.

This module defines:
- The unified tree both source adapters produce (Attribute, Element, Other)
- Configuration structures (RunConfig)
- Result types (ExtractionResult, SourceReport)
"""

from __future__ import annotations

from typing import Union

import msgspec

from selector_extractor.config.constants import (
    DEFAULT_ENCODING,
    DEFAULT_MAX_FILE_BYTES,
    Mode,
    RunMode,
)

# ==== UNIFIED TREE ==== #

class Attribute(msgspec.Struct, frozen=True):
    """
    Single attribute of an element, in source order.

    Attributes:
        name: Attribute name as written (lower-cased by the HTML parser)
        value: Literal string value, or None when the attribute has no
            value or its value is not a string literal
    """

    name: str
    value: str | None = None




class Element(msgspec.Struct, tag="element"):
    """
    Tag node of the unified tree.

    Attributes:
        name: Tag or component name (not used by extraction)
        attributes: Attributes in source order, duplicates preserved
        children: Child nodes in source order
    """

    name: str
    attributes: tuple[Attribute, ...] = ()
    children: list[Node] = msgspec.field(default_factory=list)




class Other(msgspec.Struct, tag="other"):
    """
    Any non-tag node (text, comment, doctype, JSX expression).

    Other nodes never carry children: whatever the parser nested below
    them is not part of the unified tree.
    """

    kind: str


Node = Union[Element, Other]
"""Closed set of unified tree node variants."""




# ==== CONFIGURATION MODELS ==== #

class RunConfig(msgspec.Struct, omit_defaults=True):
    """
    Runtime configuration for file-based extraction runs.

    Attributes:
        mode: Mode used for every file, or 'auto' to detect by extension
        max_file_bytes: Files larger than this are skipped
        encoding: Text encoding used to read source files
        log_level: Level name applied to project loggers
    """

    mode: RunMode = "auto"
    max_file_bytes: int = DEFAULT_MAX_FILE_BYTES
    encoding: str = DEFAULT_ENCODING
    log_level: str = "INFO"




# ==== RESULT MODELS ==== #

class ExtractionResult(msgspec.Struct):
    """
    Both selector kinds collected from a single parse.

    Attributes:
        class_names: Class selectors in traversal order
        ids: Id selectors in traversal order
    """

    class_names: list[str] = msgspec.field(default_factory=list)
    ids: list[str] = msgspec.field(default_factory=list)




class SourceReport(msgspec.Struct):
    """
    Per-file outcome of a CLI run.

    Attributes:
        path: Source file path as given or discovered
        mode: Mode the file was extracted with (None if undetermined)
        class_names: Class selectors (empty when not requested or failed)
        ids: Id selectors (empty when not requested or failed)
        error: Error description when the file could not be extracted
    """

    path: str
    mode: Mode | None
    class_names: list[str] = msgspec.field(default_factory=list)
    ids: list[str] = msgspec.field(default_factory=list)
    error: str | None = None
