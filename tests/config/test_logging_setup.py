# topmark:header:start
#
#   project      : TexBundle
#   file         : test_logging_setup.py
#   file_relpath : tests/config/test_logging_setup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the TexBundle logging helpers."""

from __future__ import annotations

import logging

import pytest

from tests.conftest import parametrize
from texbundle.config.logging import (
    TRACE_LEVEL,
    TexbundleLogger,
    get_logger,
    resolve_env_log_level,
)
from texbundle.constants import LOG_LEVEL_ENV_VAR


@parametrize(
    ("value", "expected"),
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" Info ", logging.INFO),
        ("WARN", logging.WARNING),
        ("10", 10),
        ("loud", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    """Level names and numbers are honored; anything else resolves to None."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, value)
    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    """Without the variable there is no level."""
    assert resolve_env_log_level() is None


def test_get_logger_supports_trace(caplog: pytest.LogCaptureFixture) -> None:
    """Loggers are `TexbundleLogger` instances with a working `trace` method."""
    logger = get_logger("texbundle.tests.trace")
    assert isinstance(logger, TexbundleLogger)

    with caplog.at_level(TRACE_LEVEL, logger="texbundle.tests.trace"):
        logger.trace("tracing %s", "bundles")

    assert "tracing bundles" in caplog.text
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"
