"""Pytest configuration and shared fixtures."""

import pytest

from infersched.application.constants import EnvVar
from infersched.common.logging import logger


@pytest.fixture(autouse=True)
def clean_environ(monkeypatch):
    """Remove every recognised variable from the process environment."""
    for var in EnvVar:
        monkeypatch.delenv(var.value, raising=False)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger.remove()


@pytest.fixture
def warnings_log():
    """Collect loguru warning messages emitted during a test."""
    messages = []
    handler_id = logger.add(messages.append, level="WARNING", format="{message}")
    yield messages
    logger.remove(handler_id)
