"""
csvsplit package bootstrap.

Expose high-level helpers so callers can import from `csvsplit` without
needing to traverse the entire package hierarchy.
"""

from .config.settings import get_settings, Settings  # noqa: F401
from .core import (  # noqa: F401
    CsvSplitError,
    EmptyInputError,
    InvalidConfigurationError,
    SplitOptions,
    SplitResult,
    StructuralValidationError,
    ValidationResult,
    estimate_chunk_count,
    is_valid_csv,
    split_csv,
    validate_and_normalize,
)

__all__ = [
    "Settings",
    "get_settings",
    "CsvSplitError",
    "EmptyInputError",
    "InvalidConfigurationError",
    "StructuralValidationError",
    "SplitOptions",
    "SplitResult",
    "ValidationResult",
    "estimate_chunk_count",
    "is_valid_csv",
    "split_csv",
    "validate_and_normalize",
]
