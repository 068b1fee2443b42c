"""
Logging setup shared by the command line and library callers.
"""

from .setup import configure_logging  # noqa: F401

__all__ = ["configure_logging"]
