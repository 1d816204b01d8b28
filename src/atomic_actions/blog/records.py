"""Read and write helpers for users and posts.

Writes take an open :class:`Transaction`; reads accept either the
:class:`Database` or a transaction so they see uncommitted rows when needed.
"""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from typing import Any, Union

from pydantic import BaseModel, ValidationError

from atomic_actions.action.errors import ValidationErrors
from atomic_actions.blog.models import PostRecord, UserRecord
from atomic_actions.db.store import Database
from atomic_actions.db.transaction import Transaction
from atomic_actions.exceptions import RecordInvalid, RecordNotFound

Reader = Union[Database, Transaction]

_USER_COLUMNS = "id, name, posts_count, created_at, updated_at"


def _validated(model: type[BaseModel], data: dict[str, Any]) -> Any:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        errors = ValidationErrors()
        for err in exc.errors(include_url=False):
            loc = err["loc"]
            errors.add(str(loc[0]) if loc else ValidationErrors.BASE, err["msg"])
        details = ", ".join(errors.full_messages())
        raise RecordInvalid(f"Validation failed: {details}", errors=errors.to_dict()) from exc


def _user_from_row(row: sqlite3.Row) -> UserRecord:
    return UserRecord(
        id=row["id"],
        name=row["name"],
        posts_count=row["posts_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def create_user(tx: Transaction, name: str | None) -> UserRecord:
    user: UserRecord = _validated(UserRecord, {"name": name})
    cursor = tx.execute(
        "INSERT INTO users (name, posts_count, created_at, updated_at) VALUES (?, ?, ?, ?)",
        (user.name, user.posts_count, user.created_at.isoformat(), user.updated_at.isoformat()),
    )
    return user.model_copy(update={"id": cursor.lastrowid})


def find_user(scope: Reader, user_id: int) -> UserRecord:
    row = scope.fetchone(f"SELECT {_USER_COLUMNS} FROM users WHERE id = ?", (user_id,))
    if row is None:
        raise RecordNotFound(f"User {user_id} not found")
    return _user_from_row(row)


def list_users(scope: Reader) -> list[UserRecord]:
    rows = scope.fetchall(f"SELECT {_USER_COLUMNS} FROM users ORDER BY id")
    return [_user_from_row(r) for r in rows]


def update_user(tx: Transaction, user: UserRecord, **changes: Any) -> UserRecord:
    if user.id is None:
        raise RecordNotFound("Cannot update a user that was never saved")
    data = user.model_dump()
    data.update(changes)
    data["updated_at"] = datetime.now(timezone.utc)
    updated: UserRecord = _validated(UserRecord, data)
    cursor = tx.execute(
        "UPDATE users SET name = ?, posts_count = ?, updated_at = ? WHERE id = ?",
        (updated.name, updated.posts_count, updated.updated_at.isoformat(), updated.id),
    )
    if cursor.rowcount == 0:
        raise RecordNotFound(f"User {user.id} not found")
    return updated


def create_post(tx: Transaction, user: UserRecord, title: str | None) -> PostRecord:
    post: PostRecord = _validated(PostRecord, {"user_id": user.id, "title": title})
    cursor = tx.execute(
        "INSERT INTO posts (user_id, title, created_at) VALUES (?, ?, ?)",
        (post.user_id, post.title, post.created_at.isoformat()),
    )
    return post.model_copy(update={"id": cursor.lastrowid})


def count_posts(scope: Reader, user_id: int | None = None) -> int:
    if user_id is None:
        row = scope.fetchone("SELECT COUNT(*) FROM posts")
    else:
        row = scope.fetchone("SELECT COUNT(*) FROM posts WHERE user_id = ?", (user_id,))
    return int(row[0]) if row else 0
