"""Test configuration and fixtures."""

from datetime import datetime, timedelta

import logfire
import pytest

# Keep telemetry local; must run before the app module is imported
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def at(minutes: int) -> datetime:
    """Deterministic timestamp ``minutes`` after BASE_TIME."""
    return BASE_TIME + timedelta(minutes=minutes)


@pytest.fixture(autouse=True)
def _no_rate_limit(monkeypatch):
    """Tests opt back into rate limiting explicitly."""
    monkeypatch.setenv("RATE_LIMIT__ENABLED", "false")
