"""Shared test fixtures."""
import pytest
import structlog

from fieldrules.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Every test starts from default settings, unaffected by the caller's env."""
    for name in ("FIELDRULES_CONVERT", "FIELDRULES_LOG_LEVEL", "FIELDRULES_LOG_REJECTIONS"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def structlog_defaults():
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
