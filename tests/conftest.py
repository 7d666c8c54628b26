"""Shared test fixtures for datestring tests."""

import logging
import os
import time
from collections.abc import Iterator
from datetime import datetime, timezone

import pytest

# North American eastern time as a POSIX rule, no zone files needed
EASTERN_RULE = "EST+05EDT,M3.2.0,M11.1.0"


@pytest.fixture
def utc_datetime() -> datetime:
    """2018-07-09 15:33:24 UTC, a Monday."""
    return datetime(2018, 7, 9, 15, 33, 24, tzinfo=timezone.utc)


@pytest.fixture
def host_eastern() -> Iterator[str]:
    """Switch the process's local zone to US eastern time for one test."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() not available")
    previous = os.environ.get("TZ")
    os.environ["TZ"] = EASTERN_RULE
    time.tzset()
    try:
        yield EASTERN_RULE
    finally:
        if previous is None:
            del os.environ["TZ"]
        else:
            os.environ["TZ"] = previous
        time.tzset()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove DATESTRING_* variables from the environment."""
    for name in ("DATESTRING_WEEKDAYS", "DATESTRING_MONTHS", "DATESTRING_TIMEZONE"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def fresh_logger() -> Iterator[logging.Logger]:
    """The datestring logger without handlers, restored afterwards."""
    logger = logging.getLogger("datestring")
    saved_handlers = logger.handlers[:]
    saved_level = logger.level
    logger.handlers.clear()
    try:
        yield logger
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers[:] = saved_handlers
        logger.setLevel(saved_level)
