"""Shared test fixtures and configuration."""

import logging

import pytest

from search_config.config import get_settings


SETTINGS_ENV = ("SEARCH_CONFIG_LOG_LEVEL", "SEARCH_CONFIG_LOG_JSON", "SEARCH_CONFIG_JSON_INDENT")


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    """Run each test with default settings and no stray .env file."""
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way it was after a test reconfigures it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
