"""Tests for settings configuration."""

from __future__ import annotations

from pathlib import Path

from atomic_actions.config.settings import Settings


class TestSettings:
    def test_default_values(self, monkeypatch):
        monkeypatch.delenv("ATOMIC_ACTIONS_DB_PATH", raising=False)
        monkeypatch.delenv("ATOMIC_ACTIONS_LOG_LEVEL", raising=False)
        s = Settings()
        assert s.log_level == "INFO"
        assert s.db_path == Path.home() / ".atomic_actions" / "blog.db"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("ATOMIC_ACTIONS_DB_PATH", "/tmp/test.db")
        monkeypatch.setenv("ATOMIC_ACTIONS_LOG_LEVEL", "DEBUG")
        s = Settings()
        assert isinstance(s.db_path, Path)
        assert s.db_path == Path("/tmp/test.db")
        assert s.log_level == "DEBUG"

    def test_env_prefix(self, monkeypatch):
        monkeypatch.delenv("ATOMIC_ACTIONS_LOG_LEVEL", raising=False)
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        s = Settings()
        assert s.log_level == "INFO"

    def test_fixture_settings(self, mock_settings, tmp_path):
        assert mock_settings.db_path == tmp_path / "blog.db"
        assert mock_settings.log_level == "DEBUG"
