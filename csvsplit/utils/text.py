from __future__ import annotations

from typing import List, Tuple


def preview_lines(text: str, *, limit: int = 5) -> Tuple[List[str], int]:
    """
    Return the first ``limit`` lines of ``text`` and how many lines follow.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    lines = text.split("\n")
    return lines[:limit], max(len(lines) - limit, 0)


__all__ = ["preview_lines"]
