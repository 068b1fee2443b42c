from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .errors import StructuralValidationError


@dataclass(frozen=True)
class SplitOptions:
    """How a document is partitioned. Defaults belong to the caller."""

    max_lines_per_file: int
    include_header: bool


@dataclass(frozen=True)
class SplitResult:
    chunks: Tuple[str, ...]
    total_chunks: int
    original_line_count: int


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of ``validate_and_normalize``.

    ``issues`` also lists non-fatal normalizations, so a valid result may
    still carry issues.
    """

    is_valid: bool
    normalized_content: str
    issues: Tuple[str, ...] = ()

    def raise_for_status(self) -> str:
        """Return the normalized content, or raise if the input was invalid."""
        if not self.is_valid:
            raise StructuralValidationError(self.issues)
        return self.normalized_content


__all__ = ["SplitOptions", "SplitResult", "ValidationResult"]
