"""Transaction handle passed into ``Action.execute()``."""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, ContextManager, Protocol, Sequence

from atomic_actions.exceptions import ConstraintViolation, TransactionClosedError

logger = logging.getLogger(__name__)


class TransactionScope(Protocol):
    """Anything that can open an atomic unit of work.

    Both :class:`~atomic_actions.db.store.Database` and an open
    :class:`Transaction` satisfy it, so actions can be saved at the top level
    or nested inside another action's transaction.
    """

    def transaction(self) -> ContextManager[Transaction]:
        ...  # pragma: no cover


class Transaction:
    """An open BEGIN ... COMMIT/ROLLBACK block on a SQLite connection.

    Nested ``transaction()`` calls join this unit. A nested block that raises
    marks the whole unit rollback-only.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn
        self.active = True
        self.rollback_only = False
        self.depth = 0

    def _get_conn(self) -> sqlite3.Connection:
        if not self.active:
            raise TransactionClosedError("Transaction already closed")
        return self._conn

    def execute(self, sql: str, params: Sequence[Any] = ()) -> sqlite3.Cursor:
        conn = self._get_conn()
        try:
            return conn.execute(sql, params)
        except sqlite3.IntegrityError as exc:
            raise ConstraintViolation(str(exc)) from exc

    def fetchone(self, sql: str, params: Sequence[Any] = ()) -> sqlite3.Row | None:
        return self.execute(sql, params).fetchone()

    def fetchall(self, sql: str, params: Sequence[Any] = ()) -> list[sqlite3.Row]:
        return self.execute(sql, params).fetchall()

    @contextmanager
    def transaction(self) -> Iterator[Transaction]:
        self._get_conn()
        self.depth += 1
        try:
            yield self
        except BaseException:
            logger.debug("Nested block failed at depth %d; marking rollback-only", self.depth)
            self.rollback_only = True
            raise
        finally:
            self.depth -= 1
