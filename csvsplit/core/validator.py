from __future__ import annotations

import logging
from typing import List, Optional

from .errors import EMPTY_INPUT_MESSAGE
from .models import ValidationResult
from .tokenizer import tokenize

logger = logging.getLogger("csvsplit")

TRAILING_NEWLINE_ISSUE = "Added missing trailing newline"
NO_ROWS_ISSUE = "No valid CSV rows found"


def validate_and_normalize(raw_text: str, *, preview_rows: Optional[int] = None) -> ValidationResult:
    """
    Check that ``raw_text`` is consistent tabular data and normalize its
    trailing newline.

    The newline fix is always applied and recorded as an issue, but only
    structural problems (tokenizer errors, no rows, ragged rows) make the
    result invalid. ``preview_rows`` limits the structural check to the
    first N parsed rows.
    """
    if not raw_text or not raw_text.strip():
        return ValidationResult(
            is_valid=False,
            normalized_content=raw_text,
            issues=(EMPTY_INPUT_MESSAGE,),
        )

    issues: List[str] = []
    normalized = raw_text
    if not raw_text.endswith("\n"):
        normalized = raw_text + "\n"
        issues.append(TRAILING_NEWLINE_ISSUE)

    parsed = tokenize(normalized, max_rows=preview_rows)

    if parsed.errors:
        issues.extend(str(error) for error in parsed.errors)
        return _invalid(normalized, issues)

    if not parsed.rows:
        issues.append(NO_ROWS_ISSUE)
        return _invalid(normalized, issues)

    expected = len(parsed.rows[0].fields)
    for row in parsed.rows[1:]:
        actual = len(row.fields)
        if actual != expected:
            issues.append(f"Line {row.line} has {actual} columns, expected {expected}")
            return _invalid(normalized, issues)

    logger.debug("CSV validated: %d rows checked, %d columns", len(parsed.rows), expected)
    return ValidationResult(is_valid=True, normalized_content=normalized, issues=tuple(issues))


def is_valid_csv(raw_text: str) -> bool:
    return validate_and_normalize(raw_text).is_valid


def _invalid(normalized: str, issues: List[str]) -> ValidationResult:
    logger.debug("CSV validation failed: %s", "; ".join(issues))
    return ValidationResult(is_valid=False, normalized_content=normalized, issues=tuple(issues))


__all__ = ["NO_ROWS_ISSUE", "TRAILING_NEWLINE_ISSUE", "is_valid_csv", "validate_and_normalize"]
