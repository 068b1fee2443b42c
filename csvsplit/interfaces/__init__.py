"""
CLI and other user-facing interfaces.
"""

from .cli import main, parse_args  # noqa: F401

__all__ = ["main", "parse_args"]
