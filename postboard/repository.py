"""Storage of posts."""

from __future__ import annotations

import logging
import sqlite3
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import closing, contextmanager
from os import PathLike
from pathlib import Path

from postboard.entity import Post

logger = logging.getLogger(__name__)

_SCHEMA = """
create table posts (id integer not null primary key, title text, txt text);
delete from posts;
"""


class PostRepository(ABC):
    """Where posts are kept."""

    @abstractmethod
    def save(self, post: Post) -> Post:
        """Store a post and return it."""

    @abstractmethod
    def find_all(self) -> list[Post]:
        """Return every stored post."""

    @abstractmethod
    def delete(self, post: Post) -> None:
        """Remove the post with the identifier of the given one."""


class SQLiteRepository(PostRepository):
    """A repository backed by a fresh SQLite database file."""

    def __init__(self, path: str | PathLike[str] = "posts.db") -> None:
        self.path = Path(path)
        self.path.unlink(missing_ok=True)
        with closing(sqlite3.connect(self.path)) as db:
            try:
                db.executescript(_SCHEMA)
            except sqlite3.Error as exc:
                logger.warning("%r: %s", exc, _SCHEMA)

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        with closing(sqlite3.connect(self.path)) as db:
            with db:
                yield db

    def save(self, post: Post) -> Post:
        with self._transaction() as db:
            db.execute(
                "insert into posts(id, title, txt) values(?, ?, ?)",
                (post.id, post.title, post.text),
            )
        return post

    def find_all(self) -> list[Post]:
        with closing(sqlite3.connect(self.path)) as db:
            rows = db.execute("select id, title, txt from posts").fetchall()
        return [Post(id=post_id, title=title, text=text) for post_id, title, text in rows]

    def delete(self, post: Post) -> None:
        with self._transaction() as db:
            db.execute("delete from posts where id = ?", (post.id,))