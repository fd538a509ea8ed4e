"""
Command-line interface for the selector extractor.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from selector_extractor.config.env import load_run_config
from selector_extractor.core.errors import ExtractorError
from selector_extractor.core.extractor import Extractor
from selector_extractor.core.models import RunConfig, SourceReport
from selector_extractor.utils.io import (
    collect_source_files,
    detect_mode,
    encode_reports_json,
    encode_reports_jsonl,
    read_source,
)
from selector_extractor.utils.logging import get_logger, set_log_level

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="selector-extractor",
        description="List CSS class and id selectors used in HTML and JSX sources",
    )
    parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="Source files or directories (searched recursively)",
    )
    parser.add_argument(
        "--mode",
        choices=["auto", "markup", "component"],
        default=None,
        help="Source dialect (default: auto, by file extension)",
    )
    parser.add_argument(
        "--kind",
        choices=["all", "class", "id"],
        default="all",
        help="Selector kinds to extract (default: all)",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json", "jsonl"],
        default="text",
        dest="output_format",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def extract_file(path: Path, config: RunConfig, kind: str) -> SourceReport:
    """
    Extract selectors from one file, turning failures into an error report.

    Args:
        path: Source file
        config: Run configuration (mode, size limit, encoding)
        kind: 'all', 'class' or 'id'

    Returns:
        SourceReport; `error` is set when the file could not be extracted
    """
    mode = detect_mode(path) if config.mode == "auto" else config.mode

    if mode is None:
        logger.warning(f"Skipping {path}: unknown extension, pass --mode")
        return SourceReport(path=str(path), mode=None, error="unknown file extension")

    report = SourceReport(path=str(path), mode=mode)

    try:
        contents = read_source(path, config.max_file_bytes, config.encoding)
    except (ExtractorError, OSError, UnicodeDecodeError, LookupError) as e:
        logger.warning(f"Skipping {path}: {e}")
        report.error = str(e)
        return report

    extractor = Extractor(mode)

    try:
        if kind == "class":
            report.class_names = extractor.extract_class_name(contents)
        elif kind == "id":
            report.ids = extractor.extract_id(contents)
        else:
            result = extractor.extract(contents)
            report.class_names = result.class_names
            report.ids = result.ids
    except ExtractorError as e:
        logger.error(f"Extraction failed for {path}: {e}")
        report.error = str(e)

    return report


def _render_text(reports: list[SourceReport]) -> str:
    lines = [
        f"{report.path}\t{selector}"
        for report in reports
        for selector in [*report.class_names, *report.ids]
    ]
    return "\n".join(lines) + ("\n" if lines else "")


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main CLI entry point.

    Returns:
        0 if every file was extracted, 1 if any file failed
    """
    args = build_parser().parse_args(argv)

    # Load base config
    config = load_run_config()

    # Apply CLI overrides
    if args.mode is not None:
        config.mode = args.mode
    if args.verbose:
        config.log_level = "DEBUG"
    set_log_level(config.log_level)

    try:
        files = collect_source_files(args.paths)
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1

    logger.debug(f"Extracting selectors from {len(files)} file(s)")
    reports = [extract_file(path, config, args.kind) for path in files]

    if args.output_format == "json":
        sys.stdout.write(encode_reports_json(reports).decode("utf-8") + "\n")
    elif args.output_format == "jsonl":
        sys.stdout.write(encode_reports_jsonl(reports).decode("utf-8"))
    else:
        sys.stdout.write(_render_text(reports))

    return 1 if any(report.error is not None for report in reports) else 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
