"""Unit tests for console logging configuration."""

import logging

import pytest

from identity_config import clear_settings_cache, configure_logging
from identity_config.logging_setup import LOG_FORMAT


@pytest.fixture
def restore_logging(monkeypatch):
    """Undo configure_logging's changes to the root and package loggers."""
    root = logging.getLogger()
    root_level = root.level
    levels = {
        name: logging.getLogger(name).level
        for name in ("identity_store", "sqlalchemy.engine", "aiosqlite", "asyncpg")
    }
    configure_logging.cache_clear()
    clear_settings_cache()

    yield monkeypatch

    configure_logging.cache_clear()
    clear_settings_cache()
    for handler in root.handlers[:]:
        if handler.formatter is not None and handler.formatter._fmt == LOG_FORMAT:
            root.removeHandler(handler)
    root.setLevel(root_level)
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


class TestConfigureLogging:
    """Test that configure_logging applies the configured levels once."""

    def test_package_level_from_settings(self, restore_logging):
        restore_logging.setenv("LOG_LEVEL", "DEBUG")

        configure_logging()

        assert logging.getLogger("identity_store").level == logging.DEBUG
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
        assert logging.getLogger("aiosqlite").level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, restore_logging):
        restore_logging.setenv("LOG_LEVEL", "chatty")

        configure_logging()

        assert logging.getLogger("identity_store").level == logging.INFO

    def test_format(self, restore_logging):
        configure_logging()

        formatters = [h.formatter for h in logging.getLogger().handlers if h.formatter]
        assert any(f._fmt == LOG_FORMAT for f in formatters)

    def test_runs_once(self, restore_logging):
        configure_logging()
        handlers = logging.getLogger().handlers[:]

        configure_logging()

        assert logging.getLogger().handlers == handlers
