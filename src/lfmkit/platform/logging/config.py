"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Expose the shared library logger and an opt-in console/file setup.
Why: Separate handler formatting from setup so configuration stays concise.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Final

from rich.console import Console

from .handlers import RequestRichHandler

LOGGER_NAME: Final[str] = "lfmkit"


def _clear_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


def library_logger() -> logging.Logger:
    """Return the ``lfmkit`` logger with only a ``NullHandler`` attached.

    Records propagate to whatever the host application configured.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.NOTSET)
    _clear_handlers(logger)
    logger.addHandler(logging.NullHandler())
    logger.propagate = True
    return logger


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """Set up Rich console and optional file output for the library logger.

    Propagation is turned off so a configured root logger does not print
    the same records twice.

    Args:
        log_file: Path to the log file. If None, only console logging is enabled.
        console_level: Logging level for console output. Defaults to INFO.
        file_level: Logging level for file output. Defaults to DEBUG.

    Returns:
        logging.Logger: Configured logger instance.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    _clear_handlers(logger)

    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    console = Console(stderr=True, soft_wrap=True)
    console_handler = RequestRichHandler(console=console)
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    if log_file is not None:
        resolved_log_file = Path(log_file).expanduser().resolve()
        os.makedirs(resolved_log_file.parent, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            resolved_log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


logger: Final[logging.Logger] = library_logger()


__all__ = ["LOGGER_NAME", "library_logger", "logger", "setup_logger"]
