from __future__ import annotations

from typing import Iterable

EMPTY_INPUT_MESSAGE = "CSV content cannot be empty"


class CsvSplitError(ValueError):
    """Base class for every error raised by the splitting core."""


class EmptyInputError(CsvSplitError):
    def __init__(self, message: str = EMPTY_INPUT_MESSAGE) -> None:
        super().__init__(message)


class InvalidConfigurationError(CsvSplitError):
    """Raised when split options cannot produce a bounded partition."""


class StructuralValidationError(CsvSplitError):
    """
    Raised for ragged or unparsable CSV. Carries the human-readable issues
    that ``validate_and_normalize`` collected.
    """

    def __init__(self, issues: Iterable[str]) -> None:
        self.issues = tuple(issues)
        super().__init__(", ".join(self.issues))


__all__ = [
    "EMPTY_INPUT_MESSAGE",
    "CsvSplitError",
    "EmptyInputError",
    "InvalidConfigurationError",
    "StructuralValidationError",
]
