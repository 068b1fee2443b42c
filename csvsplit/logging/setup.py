from __future__ import annotations

import logging
from pathlib import Path

DEFAULT_LOG_NAME = "csvsplit"
DEFAULT_LOG_FILENAME = "csvsplit.log"


def configure_logging(
    *,
    app_name: str = DEFAULT_LOG_NAME,
    base_dir: Path | None = None,
    console_level: int = logging.INFO,
) -> logging.Logger:
    """
    Configure application logging with both console and file handlers.
    The file log always records DEBUG; `console_level` only affects the
    terminal. Subsequent calls return the already-configured logger.
    """
    if base_dir is None:
        base_dir = Path.cwd()

    logger = logging.getLogger(app_name)
    if logger.handlers:
        return logger

    log_path = Path(base_dir) / DEFAULT_LOG_FILENAME
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger.setLevel(logging.DEBUG)

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)

    formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    file_handler.setFormatter(formatter)
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


__all__ = ["configure_logging"]
