"""
Shared test fixtures for table-print tests.
Patches config module so tests never read a real .env or leak runtime state.
"""

import os
import sys

import pytest

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Ensure every test starts with a clean config state and an empty
    declared-columns registry."""
    from table_print import config, fields

    monkeypatch.setattr(config, "env", {})
    monkeypatch.setattr(config, "MAX_FIELD_LENGTH", 30)
    monkeypatch.setattr(config, "SAMPLE_TIME_BUDGET", 2.0)
    monkeypatch.setattr(config, "LOG_ENABLED", False)
    monkeypatch.setattr(fields, "_declared_columns", {})


class FakeClock:
    """Callable clock that advances by *step* seconds on every read."""

    def __init__(self, step=0.0):
        self.now = 0.0
        self.step = step
        self.reads = 0

    def __call__(self):
        self.reads += 1
        current = self.now
        self.now += self.step
        return current


@pytest.fixture
def fake_clock():
    return FakeClock
