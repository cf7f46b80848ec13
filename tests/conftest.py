"""Pytest configuration and fixtures for dynamic button tests."""

import logging

import pytest

from config.log import LOGGER_NAME


@pytest.fixture
def on_click():
    """Provide a zero-argument click handler that records its calls."""
    calls = []

    def handler() -> None:
        calls.append(True)

    handler.calls = calls
    return handler


@pytest.fixture
def clean_env(monkeypatch):
    """Remove package settings from the process environment."""
    for name in ("DYNAMIC_BUTTON_LOG_LEVEL", "DYNAMIC_BUTTON_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def package_logger():
    """Yield the package logger and restore its handlers, level and propagation."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate
