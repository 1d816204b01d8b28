"""Application settings loaded from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "ATOMIC_ACTIONS_"}

    db_path: Path = Field(
        default=Path.home() / ".atomic_actions" / "blog.db",
        description="SQLite database path",
    )
    log_level: str = Field(default="INFO", description="Logging level")
