"""Where: src/lexpath/config/settings.py
What: Derived runtime settings sourced from the persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Grammar names are validated later by the grammar registry.
Trade-offs: - Invalid values fall back to defaults with a warning instead of failing import.
"""

from __future__ import annotations

import codecs
import logging
from pathlib import Path

from lexpath.config.config import (
    CONSOLE_LOG_LEVEL_DEFAULT,
    ENCODING_DEFAULT,
    GRAMMAR_DEFAULT,
    config as app_config,
)
from lexpath.platform.logging import logger

# Grammar ----------------------------------------------------------------------

_grammar = str(getattr(app_config, "grammar", GRAMMAR_DEFAULT) or GRAMMAR_DEFAULT)
DEFAULT_GRAMMAR_NAME: str = _grammar.strip().lower()


# Default codec ----------------------------------------------------------------

_encoding = str(getattr(app_config, "encoding", ENCODING_DEFAULT) or ENCODING_DEFAULT)
try:
    DEFAULT_ENCODING: str = codecs.lookup(_encoding).name
except LookupError:
    logger.warning("Unknown encoding %r in configuration; using %s", _encoding, ENCODING_DEFAULT)
    DEFAULT_ENCODING = ENCODING_DEFAULT


# CLI logging ------------------------------------------------------------------

LOG_FILE: Path | None = getattr(app_config, "log_file", None)

_level_name = str(getattr(app_config, "console_log_level", CONSOLE_LOG_LEVEL_DEFAULT)).upper()
_level = logging.getLevelName(_level_name)
CONSOLE_LOG_LEVEL: int = _level if isinstance(_level, int) else logging.WARNING


__all__ = [
    "DEFAULT_GRAMMAR_NAME",
    "DEFAULT_ENCODING",
    "LOG_FILE",
    "CONSOLE_LOG_LEVEL",
]
