from __future__ import annotations

import logging
import math
from typing import List, Tuple

from .errors import EmptyInputError, InvalidConfigurationError
from .models import SplitOptions, SplitResult

logger = logging.getLogger("csvsplit")


def split_csv(normalized_text: str, options: SplitOptions) -> SplitResult:
    """
    Partition CSV text into chunks of at most ``options.max_lines_per_file``
    lines, optionally repeating the header at the top of every chunk.

    Lines are split on ``\\n`` only; a preceding ``\\r`` stays part of the
    line. Data lines keep their original order, with no gaps or overlap.

    Raises:
        EmptyInputError: if the text is empty or whitespace only.
        InvalidConfigurationError: if the options leave no room for data.
    """
    _check_not_empty(normalized_text)
    _check_max_lines(options)

    header, data_lines = _split_lines(normalized_text)
    if not data_lines:
        return SplitResult(
            chunks=(header if options.include_header else "",),
            total_chunks=1,
            original_line_count=1,
        )

    capacity = effective_capacity(options)
    chunks: List[str] = []
    for start in range(0, len(data_lines), capacity):
        body = "\n".join(data_lines[start : start + capacity])
        chunks.append(f"{header}\n{body}" if options.include_header else body)

    logger.debug(
        "Split %d data lines into %d chunks of up to %d lines",
        len(data_lines),
        len(chunks),
        capacity,
    )
    return SplitResult(
        chunks=tuple(chunks),
        total_chunks=len(chunks),
        original_line_count=1 + len(data_lines),
    )


def estimate_chunk_count(raw_text: str, options: SplitOptions) -> int:
    """
    Predict ``split_csv(raw_text, options).total_chunks`` without building
    the chunks. Empty input yields 0 rather than an error so previews can
    show an empty state.
    """
    if not raw_text or not raw_text.strip():
        return 0
    _check_max_lines(options)

    _, data_lines = _split_lines(raw_text)
    if not data_lines:
        return 1
    return math.ceil(len(data_lines) / effective_capacity(options))


def effective_capacity(options: SplitOptions) -> int:
    """Number of data lines a chunk can hold once the header slot is reserved."""
    _check_max_lines(options)
    capacity = options.max_lines_per_file - 1 if options.include_header else options.max_lines_per_file
    if capacity <= 0:
        raise InvalidConfigurationError(
            "max_lines_per_file must be greater than 1 when the header is included"
        )
    return capacity


def count_lines(raw_text: str) -> int:
    if not raw_text or not raw_text.strip():
        return 0
    return len(raw_text.strip().split("\n"))


def _split_lines(text: str) -> Tuple[str, List[str]]:
    lines = text.strip().split("\n")
    return lines[0], lines[1:]


def _check_not_empty(text: str) -> None:
    if not text or not text.strip():
        raise EmptyInputError()


def _check_max_lines(options: SplitOptions) -> None:
    value = options.max_lines_per_file
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidConfigurationError("max_lines_per_file must be greater than 0")


__all__ = ["count_lines", "effective_capacity", "estimate_chunk_count", "split_csv"]
