"""Rich display helpers for CLI output."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from atomic_actions.blog.models import PostRecord, UserRecord

console = Console()


def print_users(users: list[UserRecord]) -> None:
    table = Table(title="Users", expand=True)
    table.add_column("ID", style="bold", width=6)
    table.add_column("Name", style="cyan")
    table.add_column("Posts", justify="right")
    table.add_column("Updated")

    for user in users:
        table.add_row(
            str(user.id),
            user.name,
            str(user.posts_count),
            user.updated_at.strftime("%Y-%m-%d %H:%M"),
        )

    console.print(table)


def print_user(user: UserRecord) -> None:
    console.print(f"[green]User {user.id}[/] {user.name} ({user.posts_count} posts)")


def print_post(post: PostRecord, author: UserRecord) -> None:
    console.print(
        f"[green]Post {post.id}[/] \"{post.title}\" by {author.name} "
        f"({author.posts_count} posts)"
    )


def print_error(message: str) -> None:
    console.print(Panel(f"[red]{message}[/]", title="Error", border_style="red"))


def print_info(message: str) -> None:
    console.print(f"[dim]{message}[/]")
