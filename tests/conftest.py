"""Shared pytest configuration and fixtures."""
import time
from datetime import datetime, timezone
from pathlib import Path

import pytest
from loguru import logger

from flexdates.config import DatesConfig
from flexdates.datetime_utils import clock
from flexdates.logging import setup_logging

# Wednesday, in the week of Sunday 2025-02-09 to Saturday 2025-02-15
FROZEN_NOW = datetime(2025, 2, 12, 14, 30, 45, tzinfo=timezone.utc)

def set_host_zone(monkeypatch, tz: str):
    """Point the process local time zone at a POSIX TZ string."""
    monkeypatch.setenv("TZ", tz)
    if hasattr(time, "tzset"):
        time.tzset()

@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Set up logging for tests."""
    log_dir = Path(__file__).parent / "logs"
    log_dir.mkdir(exist_ok=True)
    setup_logging(log_dir / "test.log")
    logger.info("Starting test session")
    yield
    logger.info("Test session completed")

@pytest.fixture(autouse=True)
def utc_host(monkeypatch):
    """Run every test with UTC as the local zone and default config."""
    set_host_zone(monkeypatch, "UTC")
    DatesConfig.reset()
    yield
    monkeypatch.undo()
    if hasattr(time, "tzset"):
        time.tzset()
    DatesConfig.reset()

@pytest.fixture
def frozen_now(monkeypatch):
    """Pin the clock to FROZEN_NOW, read in whatever the local zone is when called."""
    monkeypatch.setattr(clock, "now", lambda: FROZEN_NOW.astimezone())
    return FROZEN_NOW

@pytest.fixture
def eastern_host(monkeypatch):
    """Local zone five hours behind UTC, no DST."""
    set_host_zone(monkeypatch, "EST+05")

@pytest.fixture
def dst_host(monkeypatch):
    """US Eastern with daylight saving, from the second Sunday of March."""
    set_host_zone(monkeypatch, "EST5EDT,M3.2.0,M11.1.0")
