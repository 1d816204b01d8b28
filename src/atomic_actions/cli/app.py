"""Typer CLI commands."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from atomic_actions.blog.actions import CreatePost, CreateUser
from atomic_actions.blog.records import find_user, list_users
from atomic_actions.cli.output import (
    print_error,
    print_info,
    print_post,
    print_user,
    print_users,
)
from atomic_actions.db.store import Database
from atomic_actions.exceptions import ActionsError

console = Console()
app = typer.Typer(name="atomic-actions", help="Validated, atomic blog actions.")


def _get_database() -> Database:
    from atomic_actions.main import build_database
    db = build_database()
    db.initialize()
    return db


@app.command()
def init() -> None:
    """Create the database tables."""
    db = _get_database()
    try:
        print_info(f"Database ready at {db.db_path}")
    finally:
        db.close()


@app.command(name="add-user")
def add_user(
    name: str = typer.Argument(..., help="Display name of the new user"),
) -> None:
    """Create a user."""
    db = _get_database()
    try:
        action = CreateUser(name=name)
        action.save(db)
        if action.user is not None:
            print_user(action.user)
    except ActionsError as exc:
        print_error(str(exc))
        raise typer.Exit(1)
    finally:
        db.close()


@app.command()
def post(
    user_id: int = typer.Argument(..., help="Author's user id"),
    title: str = typer.Argument("", help="Post title"),
) -> None:
    """Publish a post and bump the author's post counter atomically."""
    db = _get_database()
    try:
        action = CreatePost(user=find_user(db, user_id), post_title=title)
        action.save(db)
        if action.post is not None:
            print_post(action.post, action.user)
    except ActionsError as exc:
        print_error(str(exc))
        raise typer.Exit(1)
    finally:
        db.close()


@app.command()
def users() -> None:
    """List users and their post counts."""
    db = _get_database()
    try:
        rows = list_users(db)
        if not rows:
            print_info("No users found.")
        else:
            print_users(rows)
    finally:
        db.close()


@app.command(name="config")
def show_config() -> None:
    """Show current configuration."""
    from atomic_actions.config.settings import Settings

    try:
        settings = Settings()
    except Exception as exc:
        print_error(f"Failed to load settings: {exc}")
        raise typer.Exit(1)

    table = Table(title="Configuration", show_header=False)
    table.add_column("Setting", style="bold cyan")
    table.add_column("Value")
    table.add_row("DB Path", str(settings.db_path))
    table.add_row("Log Level", settings.log_level)
    console.print(table)
