"""
Core splitting and validation logic for csvsplit.
"""

from .errors import (  # noqa: F401
    CsvSplitError,
    EmptyInputError,
    InvalidConfigurationError,
    StructuralValidationError,
)
from .models import SplitOptions, SplitResult, ValidationResult  # noqa: F401
from .splitter import count_lines, effective_capacity, estimate_chunk_count, split_csv  # noqa: F401
from .tokenizer import tokenize  # noqa: F401
from .validator import is_valid_csv, validate_and_normalize  # noqa: F401

__all__ = [
    "CsvSplitError",
    "EmptyInputError",
    "InvalidConfigurationError",
    "StructuralValidationError",
    "SplitOptions",
    "SplitResult",
    "ValidationResult",
    "count_lines",
    "effective_capacity",
    "estimate_chunk_count",
    "split_csv",
    "tokenize",
    "is_valid_csv",
    "validate_and_normalize",
]
