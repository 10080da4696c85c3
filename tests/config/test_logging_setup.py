# topmark:header:start
#
#   project      : EnumExtender
#   file         : test_logging_setup.py
#   file_relpath : tests/config/test_logging_setup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the logging helpers (env level resolution, TRACE, formatter)."""

from __future__ import annotations

import logging as std_logging

import pytest

from enumextender.config import logging


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("TRACE", logging.TRACE_LEVEL),
        ("debug", std_logging.DEBUG),
        (" warn ", std_logging.WARNING),
        ("10", 10),
        ("bogus", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None
) -> None:
    """Names, numbers and unknown values are mapped as documented."""
    monkeypatch.setenv(logging.LOG_LEVEL_ENV_VAR, raw)
    assert logging.resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    """No environment variable means no level."""
    assert logging.resolve_env_log_level() is None


def test_get_logger_supports_trace(caplog: pytest.LogCaptureFixture) -> None:
    """Loggers created after import are EnumExtenderLogger instances with trace()."""
    logger = logging.get_logger("enumextender.tests.trace")
    assert isinstance(logger, logging.EnumExtenderLogger)
    with caplog.at_level(logging.TRACE_LEVEL, logger="enumextender.tests.trace"):
        logger.trace("hello %s", "trace")
    assert any(
        r.levelno == logging.TRACE_LEVEL and r.getMessage() == "hello trace"
        for r in caplog.records
    )


def test_chalk_formatter_keeps_message() -> None:
    """The colored formatter still contains the plain message text."""
    fmt = logging.ChalkFormatter(logging.LOG_FORMAT)
    record = std_logging.LogRecord("x", std_logging.WARNING, __file__, 1, "careful", None, None)
    assert "careful" in fmt.format(record)
