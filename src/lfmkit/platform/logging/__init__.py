"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the library logger, setup helpers, and custom Rich handlers.
Why: Provide a single canonical import path for every module.
"""

from __future__ import annotations

from .config import LOGGER_NAME, library_logger, logger, setup_logger
from .handlers import RequestRichHandler

__all__ = [
    "LOGGER_NAME",
    "RequestRichHandler",
    "library_logger",
    "logger",
    "setup_logger",
]
