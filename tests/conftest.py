"""Global pytest fixtures for helperkit."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from helperkit.config import DEBUG_ENV, LOG_LEVEL_ENV


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove all HELPERKIT_* variables so tests start from the defaults."""
    for name in (LOG_LEVEL_ENV, DEBUG_ENV):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def helperkit_logger() -> Iterator[logging.Logger]:
    """Yield the package logger and restore its handlers and level afterwards."""
    logger = logging.getLogger("helperkit")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
