# topmark:header:start
#
#   project      : Termprint
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for logging setup and the environment log level."""

from __future__ import annotations

import io
import logging as std_logging
from collections.abc import Iterator

import pytest

from termprint.config import logging
from tests.conftest import parametrize


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Put the suite-wide TRACE logging back after the test."""
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


@parametrize(
    "raw, expected",
    [
        ("debug", std_logging.DEBUG),
        (" Trace ", logging.TRACE_LEVEL),
        ("warn", std_logging.WARNING),
        ("15", 15),
        ("bogus", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None
) -> None:
    monkeypatch.setenv("TERMPRINT_LOG_LEVEL", raw)
    assert logging.resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    assert logging.resolve_env_log_level() is None


@pytest.mark.usefixtures("restore_logging")
def test_setup_logging_writes_to_stream() -> None:
    stream = io.StringIO()
    logging.setup_logging(level=std_logging.INFO, stream=stream)
    logger: logging.TermprintLogger = logging.get_logger("termprint.tests")

    logger.info("hello %s", "world")
    logger.debug("hidden")
    assert "hello world" in stream.getvalue()
    assert "hidden" not in stream.getvalue()


@pytest.mark.usefixtures("restore_logging")
def test_trace_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TERMPRINT_LOG_LEVEL", "TRACE")
    stream = io.StringIO()
    logging.setup_logging(stream=stream)
    logging.get_logger("termprint.tests").trace("fine grained")
    assert "fine grained" in stream.getvalue()


@pytest.mark.usefixtures("restore_logging")
def test_default_level_is_critical() -> None:
    stream = io.StringIO()
    logging.setup_logging(stream=stream)
    logging.get_logger("termprint.tests").error("quiet")
    assert stream.getvalue() == ""
