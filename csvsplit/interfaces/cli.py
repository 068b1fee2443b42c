from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from ..config import Settings, get_settings
from ..core import (
    CsvSplitError,
    SplitOptions,
    count_lines,
    estimate_chunk_count,
    split_csv,
    validate_and_normalize,
)
from ..logging import configure_logging
from ..utils import export_chunks, preview_lines, read_csv_text

EXIT_OK = 0
EXIT_INVALID_CSV = 1
EXIT_BAD_CONFIG = 2


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Split a CSV file into smaller files with a bounded number of lines."
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Also show debug messages on the console.",
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True

    validate_parser = subparsers.add_parser("validate", help="Check that a file is consistent CSV")
    validate_parser.add_argument("input", help="Path to the CSV file")

    preview_parser = subparsers.add_parser("preview", help="Show line counts and how many files a split would create")
    preview_parser.add_argument("input", help="Path to the CSV file")
    _add_split_options(preview_parser)
    preview_parser.add_argument(
        "--lines",
        type=int,
        default=5,
        help="Number of leading lines to show (default: 5).",
    )

    split_parser = subparsers.add_parser("split", help="Validate, split and write the chunk files")
    split_parser.add_argument("input", help="Path to the CSV file")
    _add_split_options(split_parser)
    split_parser.add_argument(
        "--output-dir",
        help="Directory for the generated files (default: CSVSPLIT_OUTPUT_ROOT or ./split_output).",
    )
    split_parser.add_argument(
        "--prefix",
        help="Filename prefix for generated files (default: CSVSPLIT_FILE_PREFIX or 'split').",
    )

    return parser.parse_args(args=argv)


def _add_split_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--max-lines",
        type=int,
        help="Maximum lines per file, header included (default: CSVSPLIT_MAX_LINES_PER_FILE or 3000).",
    )
    parser.add_argument(
        "--no-header",
        dest="include_header",
        action="store_false",
        default=None,
        help="Do not repeat the header line in each file.",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    configure_logging(
        base_dir=settings.log_dir,
        console_level=logging.DEBUG if args.verbose else logging.INFO,
    )
    logger = logging.getLogger("csvsplit")
    logger.info("Starting csvsplit %s", args.command)

    input_path = Path(args.input).expanduser()
    if not input_path.is_file():
        raise FileNotFoundError(f"CSV file not found: {input_path}")
    raw_text = read_csv_text(input_path)

    try:
        if args.command == "validate":
            return _handle_validate(raw_text, settings)
        if args.command == "preview":
            return _handle_preview(raw_text, _build_options(args, settings), args.lines)
        if args.command == "split":
            return _handle_split(args, raw_text, settings)
    except CsvSplitError as exc:
        logger.error("csvsplit %s failed: %s", args.command, exc)
        print(f"Error: {exc}")
        return EXIT_BAD_CONFIG

    raise ValueError(f"Unknown command: {args.command}")


def _build_options(args: argparse.Namespace, settings: Settings) -> SplitOptions:
    max_lines = args.max_lines if args.max_lines is not None else settings.max_lines_per_file
    include_header = settings.include_header if args.include_header is None else args.include_header
    return SplitOptions(max_lines_per_file=max_lines, include_header=include_header)


def _handle_validate(raw_text: str, settings: Settings) -> int:
    result = validate_and_normalize(raw_text, preview_rows=settings.validate_preview_rows)
    if result.is_valid:
        print("Valid CSV")
    else:
        print("Invalid CSV")
    for issue in result.issues:
        print(f"  - {issue}")
    return EXIT_OK if result.is_valid else EXIT_INVALID_CSV


def _handle_preview(raw_text: str, options: SplitOptions, limit: int) -> int:
    print(f"Total lines in CSV: {count_lines(raw_text):,}")
    print(f"Estimated files to be generated: {estimate_chunk_count(raw_text, options):,}")
    head, remaining = preview_lines(raw_text, limit=limit)
    print("\n".join(head))
    if remaining:
        print(f"... and {remaining} more lines")
    return EXIT_OK


def _handle_split(args: argparse.Namespace, raw_text: str, settings: Settings) -> int:
    logger = logging.getLogger("csvsplit")
    validation = validate_and_normalize(raw_text, preview_rows=settings.validate_preview_rows)
    if not validation.is_valid:
        message = "The uploaded file does not appear to be a valid CSV: " + ", ".join(validation.issues)
        logger.error("%s", message)
        print(message)
        return EXIT_INVALID_CSV
    if validation.issues:
        logger.info("CSV normalization applied: %s", ", ".join(validation.issues))

    options = _build_options(args, settings)
    result = split_csv(validation.normalized_content, options)

    output_dir = Path(args.output_dir).expanduser() if args.output_dir else settings.output_root
    prefix = args.prefix or settings.file_prefix
    paths = export_chunks(result, output_dir, prefix=prefix)

    print(f"Original file: {result.original_line_count} lines")
    print(f"Split into: {result.total_chunks} files")
    for path, chunk in zip(paths, result.chunks):
        line_count = chunk.count("\n") + 1
        print(f"  - {path.name}: {line_count} lines")

    logger.info("csvsplit split finished: %d files in %s", len(paths), output_dir)
    return EXIT_OK


__all__ = ["main", "parse_args"]
