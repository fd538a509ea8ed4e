"""
I/O utilities for reading sources and writing reports.

This module provides:
- Source file discovery (files and recursive directory search)
- Mode detection from file extensions
- Size-bounded source reading
- JSON / JSONL report encoding
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import msgspec

from selector_extractor.config.constants import EXTENSION_MODES, Mode
from selector_extractor.core.errors import ExtractorError
from selector_extractor.core.models import SourceReport

# ==== SOURCE DISCOVERY ==== #

def detect_mode(path: Path) -> Mode | None:
    """
    Mode for a file based on its extension.

    Args:
        path: Source file path

    Returns:
        'markup' or 'component', or None for unknown extensions

    Example:
        detect_mode(Path("index.html")) -> "markup"
        detect_mode(Path("Header.jsx")) -> "component"
    """
    return EXTENSION_MODES.get(path.suffix.lower())




def collect_source_files(paths: Iterable[Path]) -> list[Path]:
    """
    Expand paths into the list of source files to extract.

    Files are kept as given, whatever their extension. Directories are
    searched recursively for known extensions, sorted per directory.
    Duplicates are dropped, first occurrence wins.

    Raises:
        FileNotFoundError: If a path does not exist
    """
    files: list[Path] = []
    seen: set[Path] = set()

    for path in paths:
        if path.is_dir():
            candidates = sorted(
                p for p in path.rglob("*")
                if p.is_file() and detect_mode(p) is not None
            )
        elif path.exists():
            candidates = [path]
        else:
            raise FileNotFoundError(f"No such file or directory: {path}")

        for candidate in candidates:
            key = candidate.resolve()
            if key not in seen:
                seen.add(key)
                files.append(candidate)

    return files




# ==== SOURCE READING ==== #

class SourceTooLargeError(ExtractorError):
    """Source file exceeds the configured size limit."""

    def __init__(self, path: Path, size: int, limit: int) -> None:
        self.path = path
        self.size = size
        self.limit = limit
        super().__init__(f"{path} is {size} bytes (limit {limit})")




def read_source(path: Path, max_bytes: int, encoding: str = "utf-8") -> str:
    """
    Read a source file, refusing files above the size limit.

    Args:
        path: File to read
        max_bytes: Maximum accepted size in bytes
        encoding: Text encoding

    Returns:
        Decoded file contents

    Raises:
        SourceTooLargeError: If the file is larger than max_bytes
        UnicodeDecodeError: If the file is not valid in the given encoding
        LookupError: If the encoding is unknown
        OSError: If the file cannot be read
    """
    size = path.stat().st_size

    if size > max_bytes:
        raise SourceTooLargeError(path, size, max_bytes)

    return path.read_text(encoding=encoding)




# ==== REPORT ENCODING ==== #

def encode_reports_json(reports: list[SourceReport]) -> bytes:
    """Encode all reports as one JSON array."""
    return msgspec.json.encode(reports)




def encode_reports_jsonl(reports: list[SourceReport]) -> bytes:
    """Encode reports as JSON lines, one report per line."""
    encoder = msgspec.json.Encoder()
    return b"".join(encoder.encode(report) + b"\n" for report in reports)
