"""Custom exceptions."""

from __future__ import annotations


class ExtractorError(Exception):
    """Base exception for selector extraction errors."""


class ParseError(ExtractorError):
    """Source text is not valid for the configured mode's grammar."""

    def __init__(
        self,
        mode: str,
        detail: str | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.mode = mode
        self.detail = detail
        self.line = line
        self.column = column
        location = f" at {line}:{column}" if line is not None else ""
        message = f"{mode} parse error{location}: {detail or ''}"
        super().__init__(message)
