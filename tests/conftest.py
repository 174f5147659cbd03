"""Shared test fixtures."""

from datetime import datetime

import pytest


# Aug 10, 3:15:30 pm
AFTERNOON = datetime(2026, 8, 10, 15, 15, 30, 250000)


@pytest.fixture
def afternoon():
    return AFTERNOON


@pytest.fixture
def fixed_now():
    """Build a zero-argument "now" callable frozen at the given datetime."""
    def make(moment=AFTERNOON):
        return lambda: moment
    return make


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep tests away from the real user config directory."""
    monkeypatch.setenv("CLOCKTIME_CONFIG_DIR", str(tmp_path / "config"))
    return tmp_path / "config"
