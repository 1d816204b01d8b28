"""Entry point and dependency wiring."""

from __future__ import annotations

from atomic_actions.cli.app import app
from atomic_actions.config.settings import Settings
from atomic_actions.db.store import Database
from atomic_actions.log import configure_logging


def build_database(settings: Settings | None = None) -> Database:
    settings = settings or Settings()
    configure_logging(settings.log_level)
    return Database(db_path=settings.db_path)


if __name__ == "__main__":
    app()
