"""Business rules for posts."""

from __future__ import annotations

import random

from postboard.entity import Post
from postboard.repository import PostRepository


class PostValidationError(ValueError):
    """A post does not satisfy the rules for being stored."""


class PostService:
    """Validates, creates and lists posts through a repository."""

    def __init__(self, repository: PostRepository | None) -> None:
        self._repository = repository

    def validate(self, post: Post | None) -> None:
        """Raise PostValidationError if the post may not be stored."""
        if post is None:
            raise PostValidationError("the post is empty")
        if post.title == "":
            raise PostValidationError("the post title is empty")

    def create(self, post: Post) -> Post:
        """Give the post a random non-negative identifier and store it."""
        post.id = random.getrandbits(63)
        return self._require_repository().save(post)

    def find_all(self) -> list[Post]:
        """Return every stored post."""
        return self._require_repository().find_all()

    def _require_repository(self) -> PostRepository:
        if self._repository is None:
            raise RuntimeError("the post service has no repository")
        return self._repository