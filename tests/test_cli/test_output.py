"""Tests for rich output helpers."""

from __future__ import annotations

from io import StringIO
from unittest.mock import patch

from rich.console import Console

from atomic_actions.blog.models import PostRecord, UserRecord
from atomic_actions.cli.output import (
    print_error,
    print_info,
    print_post,
    print_user,
    print_users,
)


def _capture() -> tuple[Console, StringIO]:
    buf = StringIO()
    return Console(file=buf, force_terminal=False, width=120), buf


class TestOutput:
    def test_print_users(self):
        console, buf = _capture()
        users = [UserRecord(id=1, name="alice", posts_count=2), UserRecord(id=2, name="bob")]
        with patch("atomic_actions.cli.output.console", console):
            print_users(users)
        out = buf.getvalue()
        assert "Users" in out
        assert "alice" in out
        assert "bob" in out

    def test_print_user(self):
        console, buf = _capture()
        with patch("atomic_actions.cli.output.console", console):
            print_user(UserRecord(id=7, name="alice", posts_count=3))
        assert "User 7" in buf.getvalue()
        assert "3 posts" in buf.getvalue()

    def test_print_post(self):
        console, buf = _capture()
        author = UserRecord(id=1, name="alice", posts_count=1)
        with patch("atomic_actions.cli.output.console", console):
            print_post(PostRecord(id=5, user_id=1, title="Hello"), author)
        out = buf.getvalue()
        assert "Post 5" in out
        assert "Hello" in out
        assert "alice" in out

    def test_print_error(self):
        console, buf = _capture()
        with patch("atomic_actions.cli.output.console", console):
            print_error("something broke")
        assert "something broke" in buf.getvalue()
        assert "Error" in buf.getvalue()

    def test_print_info(self):
        console, buf = _capture()
        with patch("atomic_actions.cli.output.console", console):
            print_info("just so you know")
        assert "just so you know" in buf.getvalue()
