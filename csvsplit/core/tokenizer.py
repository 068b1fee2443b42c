from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

DELIMITER = ","
QUOTE = '"'

# Tokenizer states
_UNQUOTED = "unquoted"
_QUOTED = "quoted"
_QUOTE_SEEN = "quoted_quote_seen"


@dataclass(frozen=True)
class TokenizedRow:
    line: int
    fields: Tuple[str, ...]


@dataclass(frozen=True)
class TokenizeError:
    line: int
    message: str

    def __str__(self) -> str:
        return f"Line {self.line}: {self.message}"


@dataclass(frozen=True)
class TokenizeResult:
    rows: Tuple[TokenizedRow, ...]
    errors: Tuple[TokenizeError, ...]


def tokenize(text: str, *, max_rows: Optional[int] = None) -> TokenizeResult:
    """
    Parse comma-separated text into rows using double-quote quoting.

    Quoted fields may contain commas and line breaks, and ``""`` inside a
    quoted field stands for one literal quote. Rows are terminated by
    ``\\n``, ``\\r\\n`` or a lone ``\\r``. Blank rows are skipped. Each row keeps
    the 1-based physical line it starts on so callers can point at it.

    Problems do not abort parsing; they are collected in ``errors``.
    """
    rows: List[TokenizedRow] = []
    errors: List[TokenizeError] = []

    row: List[str] = []
    field: List[str] = []
    state = _UNQUOTED
    at_field_start = True
    line = 1
    row_line = 1
    quote_line = 1

    def finish_row() -> None:
        row.append("".join(field))
        if not (len(row) == 1 and row[0] == ""):
            rows.append(TokenizedRow(line=row_line, fields=tuple(row)))
        row.clear()
        field.clear()

    i = 0
    length = len(text)
    while i < length:
        if max_rows is not None and len(rows) >= max_rows:
            break
        ch = text[i]

        if state == _QUOTED:
            if ch == QUOTE:
                state = _QUOTE_SEEN
            else:
                field.append(ch)
                if ch == "\n" or (ch == "\r" and text[i + 1 : i + 2] != "\n"):
                    line += 1
            i += 1
            continue

        if state == _QUOTE_SEEN:
            if ch == QUOTE:
                field.append(QUOTE)
                state = _QUOTED
                i += 1
                continue
            state = _UNQUOTED
            if ch not in (DELIMITER, "\r", "\n"):
                # Keep the stray character as field content and carry on.
                errors.append(TokenizeError(line, "Trailing quote on quoted field is malformed"))

        if ch == DELIMITER:
            row.append("".join(field))
            field.clear()
            at_field_start = True
            i += 1
        elif ch == "\r" or ch == "\n":
            finish_row()
            at_field_start = True
            i += 2 if ch == "\r" and text[i + 1 : i + 2] == "\n" else 1
            line += 1
            row_line = line
        elif ch == QUOTE and at_field_start:
            state = _QUOTED
            at_field_start = False
            quote_line = line
            i += 1
        else:
            field.append(ch)
            at_field_start = False
            i += 1

    if state == _QUOTED:
        errors.append(TokenizeError(quote_line, "Quoted field unterminated"))
    if (row or field or state != _UNQUOTED) and (max_rows is None or len(rows) < max_rows):
        finish_row()

    return TokenizeResult(rows=tuple(rows), errors=tuple(errors))


__all__ = ["TokenizeError", "TokenizeResult", "TokenizedRow", "tokenize"]
