"""Shared fixtures for all tests."""

from __future__ import annotations

import pytest

from atomic_actions.blog.models import UserRecord
from atomic_actions.blog.records import create_user
from atomic_actions.config.settings import Settings
from atomic_actions.db.store import Database


@pytest.fixture
def mock_settings(monkeypatch, tmp_path):
    monkeypatch.setenv("ATOMIC_ACTIONS_DB_PATH", str(tmp_path / "blog.db"))
    monkeypatch.setenv("ATOMIC_ACTIONS_LOG_LEVEL", "DEBUG")
    return Settings()


@pytest.fixture
def temp_db():
    db = Database(db_path=":memory:")
    db.initialize()
    yield db
    db.close()


@pytest.fixture
def sample_user(temp_db) -> UserRecord:
    with temp_db.transaction() as tx:
        return create_user(tx, "foo")
