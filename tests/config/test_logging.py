# buildwire:header:start
#
#   project      : BuildWire
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""Logging setup: TRACE level, level parsing and the stderr handler."""

from __future__ import annotations

import logging
import sys

import pytest

from buildwire.config.logging import (
    TRACE_LEVEL,
    BuildwireLogger,
    get_logger,
    parse_log_level,
    resolve_env_log_level,
    setup_logging,
)
from tests.conftest import parametrize


@parametrize(
    ("raw", "expected"),
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("10", 10),
        ("", None),
        (None, None),
        ("loud", None),
    ],
)
def test_parse_log_level(raw: str | None, expected: int | None) -> None:
    assert parse_log_level(raw) == expected


def test_resolve_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    assert resolve_env_log_level() is None
    monkeypatch.setenv("BUILDWIRE_LOG_LEVEL", "info")
    assert resolve_env_log_level() == logging.INFO


def test_get_logger_supports_trace() -> None:
    logger = get_logger("buildwire.test")
    assert isinstance(logger, BuildwireLogger)
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_handler_writes_to_stderr() -> None:
    """Standard output is reserved for directives."""
    setup_logging(level=logging.DEBUG)
    try:
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        handler = handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr
    finally:
        setup_logging(level=TRACE_LEVEL)


@parametrize("raw", ["NOTSET", "0"])
def test_setup_logging_honors_level_zero_from_environment(
    monkeypatch: pytest.MonkeyPatch, raw: str
) -> None:
    monkeypatch.setenv("BUILDWIRE_LOG_LEVEL", raw)
    try:
        setup_logging()
        assert logging.getLogger().level == logging.NOTSET
    finally:
        setup_logging(level=TRACE_LEVEL)
