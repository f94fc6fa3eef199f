"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Build console and file handlers for the ``discogs_api`` logger.
Why: Keep handler wiring in one place so settings can reconfigure it at import.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from .handlers import DispatchRichHandler

LOGGER_NAME: Final[str] = "discogs_api"
DEFAULT_CONSOLE_LEVEL: Final[int] = logging.WARNING

_FILE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_MAX_LOG_BYTES: Final[int] = 5 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 3


def _console_handler(level: int) -> logging.Handler:
    handler = DispatchRichHandler(console=Console(stderr=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    target = Path(log_file).expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        target,
        maxBytes=_MAX_LOG_BYTES,
        backupCount=_LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = DEFAULT_CONSOLE_LEVEL,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """(Re)configure the library logger, replacing any handlers it already has.

    Args:
        log_file: Rotating log file; console only when None.
        console_level: Threshold for the Rich console handler.
        file_level: Threshold for the file handler.

    Returns:
        logging.Logger: The ``discogs_api`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for stale in list(logger.handlers):
        logger.removeHandler(stale)
        stale.close()

    logger.addHandler(_console_handler(console_level))
    if log_file is not None:
        logger.addHandler(_file_handler(log_file, file_level))
    return logger


logger: Final[logging.Logger] = setup_logger()


__all__ = ["DEFAULT_CONSOLE_LEVEL", "LOGGER_NAME", "logger", "setup_logger"]
