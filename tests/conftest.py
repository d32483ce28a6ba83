"""Shared test fixtures for reportcore tests."""

from datetime import datetime, timezone

import pytest

from reportcore.config import clear_config_cache
from reportcore.period import perioddate
from reportcore.period.perioddate import Date
from reportcore.tables import TableManager, reset_table_manager


@pytest.fixture
def today():
    """Fixed reference date (Wednesday 2024-01-10, UTC).

    Pass it as `today=` so lastN/previousN tests never depend on the clock.
    """
    return Date.factory("2024-01-10", "UTC")


@pytest.fixture
def frozen_now(monkeypatch):
    """Freeze the clock at 2024-01-10 12:00 UTC.

    Keywords such as "today" and "now" resolve against this instant, in
    whatever timezone they are asked for.
    """
    instant = datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc)
    monkeypatch.setattr(perioddate, "_now", lambda tzinfo: instant.astimezone(tzinfo))
    return instant


@pytest.fixture
def table_manager():
    """Fresh, empty TableManager."""
    return TableManager()


@pytest.fixture
def fresh_config():
    """Clear the config cache before and after the test.

    Use together with monkeypatch.setenv("REPORTCORE_CONFIG_PATH", ...).
    """
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture(autouse=True)
def _reset_process_registry():
    """Never leak the process-wide table registry between tests."""
    yield
    reset_table_manager()
