"""Tests for dependency wiring and logging setup."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from atomic_actions.db.store import Database
from atomic_actions.log import configure_logging
from atomic_actions.main import build_database


class TestBuildDatabase:
    def test_returns_database(self, mock_settings):
        db = build_database(settings=mock_settings)
        assert isinstance(db, Database)
        assert db.db_path == str(mock_settings.db_path)
        assert db._db is None

    def test_configures_log_level(self, mock_settings):
        build_database(settings=mock_settings)
        assert logging.getLogger("atomic_actions").level == logging.DEBUG

    def test_reads_settings_from_env(self, mock_settings):
        db = build_database()
        assert db.db_path == str(mock_settings.db_path)


class TestConfigureLogging:
    def test_installs_single_rich_handler(self):
        configure_logging("info")
        configure_logging("warning")
        logger = logging.getLogger("atomic_actions")
        handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        assert len(handlers) == 1
        assert logger.level == logging.WARNING
