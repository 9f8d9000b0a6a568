"""Pytest fixtures for the status page test suite."""

from datetime import datetime

import pytest

from status_page import Monitor, reset_configuration
from status_page.config import get_settings
from status_page.exceptions import ProbeFailure
from status_page.providers import BaseProvider

FROZEN_TIME = datetime(1990, 1, 1)


class PassingProvider(BaseProvider):
    """Probe that always passes."""

    name = "passing"

    def check(self):
        pass


class FailingProvider(BaseProvider):
    """Probe that fails with a diagnosable message."""

    name = "failing"

    def check(self):
        raise ProbeFailure("disk full")


class CrashingProvider(BaseProvider):
    """Probe that hits an unexpected error."""

    name = "crashing"

    def check(self):
        raise RuntimeError("boom")


class FakeRedis:
    """Minimal stand-in for a redis client."""

    def __init__(self, broken=False):
        self.values = {}
        self.broken = broken
        self.closed = False

    def set(self, key, value):
        self.values[key] = value

    def get(self, key):
        if self.broken:
            return False
        return self.values.get(key)

    def close(self):
        self.closed = True


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Fresh settings per test, without a stray .env file."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("STATUS_PAGE_LOG_TO_FILE", "false")
    monkeypatch.setenv("STATUS_PAGE_DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.delenv("STATUS_PAGE_PROVIDERS", raising=False)
    monkeypatch.delenv("STATUS_PAGE_WEBHOOK_URL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_default_monitor():
    """Leave the process-wide monitor unconfigured between tests."""
    reset_configuration()
    yield
    reset_configuration()


@pytest.fixture
def monitor():
    """Monitor with a frozen clock."""
    return Monitor(clock=lambda: FROZEN_TIME)


@pytest.fixture
def fake_redis():
    return FakeRedis()
