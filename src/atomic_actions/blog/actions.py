"""Blog actions built on the Action base class."""

from __future__ import annotations

import logging
from typing import Any

from atomic_actions.action.base import Action
from atomic_actions.action.rules import NonBlankStr, Present
from atomic_actions.blog.models import PostRecord, UserRecord
from atomic_actions.blog.records import create_post, create_user, find_user, update_user
from atomic_actions.db.transaction import Transaction

logger = logging.getLogger(__name__)


class CreateUser(Action):
    name: NonBlankStr

    def __init__(self, **inputs: Any) -> None:
        super().__init__(**inputs)
        self.user: UserRecord | None = None

    def execute(self, tx: Transaction) -> None:
        self.user = create_user(tx, self.name)

    def after_execute(self) -> None:
        logger.info("Created user %s", self.user)


class CreatePost(Action):
    """Bump the author's post counter and insert the post in one unit.

    ``post_title`` is not validated here; a blank title is rejected by
    ``create_post`` after the counter was already bumped, which rolls both
    writes back.
    """

    user: Present[UserRecord]
    post_title: str | None = None

    def __init__(self, **inputs: Any) -> None:
        super().__init__(**inputs)
        self.post: PostRecord | None = None

    def execute(self, tx: Transaction) -> None:
        # The caller's record may be stale; count from the stored row.
        author = find_user(tx, self.user.id)
        author = update_user(tx, author, posts_count=author.posts_count + 1)
        self.post = create_post(tx, author, self.post_title)
        self.user = author

    def after_execute(self) -> None:
        logger.info("User %s published post %s", self.user.id, self.post)
