from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_MAX_LINES_PER_FILE = 3_000
DEFAULT_OUTPUT_DIRNAME = "split_output"
DEFAULT_FILE_PREFIX = "split"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Application configuration bundled in a single object."""

    max_lines_per_file: int
    include_header: bool
    output_root: Path
    log_dir: Path
    file_prefix: str = DEFAULT_FILE_PREFIX
    validate_preview_rows: Optional[int] = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load and cache configuration from environment variables (and ``.env``).

    Raises:
        ValueError: if a variable is set to a value that cannot be used.
    """
    load_dotenv()

    max_lines = _positive_int("CSVSPLIT_MAX_LINES_PER_FILE", os.getenv("CSVSPLIT_MAX_LINES_PER_FILE"))
    preview_rows = _positive_int("CSVSPLIT_VALIDATE_PREVIEW_ROWS", os.getenv("CSVSPLIT_VALIDATE_PREVIEW_ROWS"))
    include_header = _flag("CSVSPLIT_INCLUDE_HEADER", os.getenv("CSVSPLIT_INCLUDE_HEADER"), default=True)

    output_root = Path(os.getenv("CSVSPLIT_OUTPUT_ROOT", DEFAULT_OUTPUT_DIRNAME)).expanduser()
    log_dir = Path(os.getenv("CSVSPLIT_LOG_DIR", ".")).expanduser()
    file_prefix = os.getenv("CSVSPLIT_FILE_PREFIX") or DEFAULT_FILE_PREFIX

    return Settings(
        max_lines_per_file=max_lines or DEFAULT_MAX_LINES_PER_FILE,
        include_header=include_header,
        output_root=output_root,
        log_dir=log_dir,
        file_prefix=file_prefix,
        validate_preview_rows=preview_rows,
    )


def _positive_int(name: str, raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be greater than 0, got {value}")
    return value


def _flag(name: str, raw: Optional[str], *, default: bool) -> bool:
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


__all__ = ["Settings", "get_settings"]
