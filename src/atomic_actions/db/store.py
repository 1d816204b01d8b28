"""SQLite-backed persistence engine providing atomic transaction scopes."""

from __future__ import annotations

import logging
import sqlite3
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Sequence, TypeVar

from atomic_actions.db.migrations import TABLES
from atomic_actions.db.transaction import Transaction
from atomic_actions.exceptions import TransactionRolledBack

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Database:
    def __init__(self, db_path: Path | str = ":memory:") -> None:
        self.db_path = str(db_path)
        self._db: sqlite3.Connection | None = None
        # One connection, one open transaction at a time.
        self._lock = threading.RLock()
        self._current: Transaction | None = None

    def initialize(self) -> None:
        if self.db_path != ":memory:":
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        self._db = sqlite3.connect(
            self.db_path, isolation_level=None, check_same_thread=False
        )
        self._db.row_factory = sqlite3.Row
        self._db.execute("PRAGMA foreign_keys = ON")
        for table_sql in TABLES:
            self._db.execute(table_sql)

    def close(self) -> None:
        if self._db:
            self._db.close()
            self._db = None

    def _get_db(self) -> sqlite3.Connection:
        if self._db is None:
            raise RuntimeError("Database not initialized, call initialize() first")
        return self._db

    @contextmanager
    def transaction(self) -> Iterator[Transaction]:
        """Open an atomic unit; commit on normal exit, roll back on error.

        Calling this again on the same thread while a transaction is open
        joins the open one instead of starting a second BEGIN.
        """
        db = self._get_db()
        with self._lock:
            if self._current is not None:
                with self._current.transaction() as tx:
                    yield tx
                return

            tx = Transaction(db)
            db.execute("BEGIN")
            logger.debug("BEGIN")
            self._current = tx
            try:
                yield tx
            except BaseException:
                _rollback(db)
                raise
            else:
                if tx.rollback_only:
                    _rollback(db)
                    raise TransactionRolledBack(
                        "Transaction rolled back because a nested block failed"
                    )
                if not db.in_transaction:
                    raise TransactionRolledBack(
                        "Transaction was already rolled back by the database"
                    )
                db.execute("COMMIT")
                logger.debug("COMMIT")
            finally:
                tx.active = False
                self._current = None

    def with_transaction(self, fn: Callable[[Transaction], T]) -> T:
        with self.transaction() as tx:
            return fn(tx)

    def fetchone(self, sql: str, params: Sequence[Any] = ()) -> sqlite3.Row | None:
        with self._lock:
            return self._get_db().execute(sql, params).fetchone()

    def fetchall(self, sql: str, params: Sequence[Any] = ()) -> list[sqlite3.Row]:
        with self._lock:
            return self._get_db().execute(sql, params).fetchall()


def _rollback(db: sqlite3.Connection) -> None:
    # SQLite may have ended the transaction already (RAISE(ROLLBACK), SQLITE_FULL,
    # some I/O errors).
    if db.in_transaction:
        db.execute("ROLLBACK")
        logger.debug("ROLLBACK")
    else:
        logger.debug("Transaction already rolled back by SQLite")
