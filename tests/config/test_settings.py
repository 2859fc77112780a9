"""Tests for settings module behavior."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def reload_settings() -> Iterator[None]:
    """Reload settings after the configuration fixtures restore the real values."""

    try:
        yield None
    finally:
        import lexpath.config.settings as settings

        _ = importlib.reload(settings)


def test_defaults(config_runtime_env: None) -> None:
    """Default configuration yields native grammar and utf-8."""
    _ = config_runtime_env

    import lexpath.config.settings as settings

    reloaded = importlib.reload(settings)

    assert reloaded.DEFAULT_GRAMMAR_NAME == "native"
    assert reloaded.DEFAULT_ENCODING == "utf-8"
    assert reloaded.LOG_FILE is None
    assert reloaded.CONSOLE_LOG_LEVEL == logging.WARNING


def test_values_follow_config(config_runtime_env: None) -> None:
    _ = config_runtime_env

    from lexpath.config.config import config as app_config

    app_config.grammar = " Windows "
    app_config.encoding = "LATIN1"
    app_config.console_log_level = "debug"

    import lexpath.config.settings as settings

    reloaded = importlib.reload(settings)

    assert reloaded.DEFAULT_GRAMMAR_NAME == "windows"
    assert reloaded.DEFAULT_ENCODING == "iso8859-1"
    assert reloaded.CONSOLE_LOG_LEVEL == logging.DEBUG


def test_invalid_values_fall_back(config_runtime_env: None) -> None:
    _ = config_runtime_env

    from lexpath.config.config import config as app_config

    app_config.encoding = "klingon"
    app_config.console_log_level = "LOUD"

    import lexpath.config.settings as settings

    reloaded = importlib.reload(settings)

    assert reloaded.DEFAULT_ENCODING == "utf-8"
    assert reloaded.CONSOLE_LOG_LEVEL == logging.WARNING
