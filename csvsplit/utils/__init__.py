"""
Utility helpers kept intentionally small and stateless.
"""

from .files import chunk_filename, ensure_csv_suffix, export_chunks, read_csv_text, write_chunk  # noqa: F401
from .text import preview_lines  # noqa: F401

__all__ = [
    "chunk_filename",
    "ensure_csv_suffix",
    "export_chunks",
    "read_csv_text",
    "write_chunk",
    "preview_lines",
]
