"""Pydantic models for blog records."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from atomic_actions.action.rules import NonBlankStr


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserRecord(BaseModel):
    id: int | None = None
    name: NonBlankStr
    posts_count: int = 0
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)


class PostRecord(BaseModel):
    id: int | None = None
    user_id: int
    title: NonBlankStr
    created_at: datetime = Field(default_factory=_utcnow)
