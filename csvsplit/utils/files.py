from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from ..core.models import SplitResult

logger = logging.getLogger("csvsplit")

CSV_SUFFIX = ".csv"


def read_csv_text(file_path: str | Path, *, encoding: str = "utf-8-sig") -> str:
    """
    Read a CSV file as text without translating line endings, so CRLF input
    reaches the validator unchanged. A UTF-8 byte order mark is dropped.
    """
    path = Path(file_path)
    try:
        with path.open("r", encoding=encoding, newline="") as fh:
            return fh.read()
    except OSError as exc:
        logger.error("Error reading file %s: %s", path, exc)
        raise


def ensure_csv_suffix(filename: str) -> str:
    return filename if filename.endswith(CSV_SUFFIX) else f"{filename}{CSV_SUFFIX}"


def chunk_filename(index: int, total: int, *, prefix: str = "split") -> str:
    """Suggested name for the zero-based ``index`` chunk out of ``total``."""
    return ensure_csv_suffix(f"{prefix}-{index + 1}-of-{total}")


def write_chunk(content: str, filename: str, output_dir: str | Path) -> Path:
    """
    Write one chunk exactly as given. Line endings are not translated, so
    the file holds the same characters as the chunk string.
    """
    out_dir = Path(output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / ensure_csv_suffix(filename)
    try:
        with out_path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(content)
    except OSError as exc:
        logger.error("Failed to write chunk %s: %s", out_path, exc)
        raise
    logger.info("Wrote %s", out_path)
    return out_path


def export_chunks(result: SplitResult, output_dir: str | Path, *, prefix: str = "split") -> List[Path]:
    """Write every chunk of ``result`` as ``{prefix}-{n}-of-{total}.csv``."""
    paths: List[Path] = []
    for index, chunk in enumerate(result.chunks):
        filename = chunk_filename(index, result.total_chunks, prefix=prefix)
        paths.append(write_chunk(chunk, filename, output_dir))
    return paths


__all__ = ["chunk_filename", "ensure_csv_suffix", "export_chunks", "read_csv_text", "write_chunk"]
