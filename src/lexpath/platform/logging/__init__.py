"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the configured logger and setup helper.
Why: Provide a single canonical import path for library and CLI code.
"""

from __future__ import annotations

from .config import DEFAULT_LOG_FILE, LOGGER_NAME, logger, setup_logger

__all__ = [
    "DEFAULT_LOG_FILE",
    "LOGGER_NAME",
    "logger",
    "setup_logger",
]
