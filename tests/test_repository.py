import sqlite3

import pytest

from postboard.entity import Post
from postboard.repository import SQLiteRepository


@pytest.fixture
def repo(tmp_path):
    return SQLiteRepository(tmp_path / "posts_test.db")


def test_save(repo):
    post = Post(id=1, title="Test Title", text="Test Text")
    saved = repo.save(post)
    assert saved == Post(id=1, title="Test Title", text="Test Text")


def test_find_all(repo):
    repo.save(Post(id=1, title="Title 1", text="Text 1"))
    repo.save(Post(id=2, title="Title 2", text="Text 2"))
    posts = repo.find_all()
    assert len(posts) == 2
    assert sorted(posts, key=lambda p: p.id) == [
        Post(id=1, title="Title 1", text="Text 1"),
        Post(id=2, title="Title 2", text="Text 2"),
    ]


def test_delete(repo):
    post = Post(id=1, title="Title", text="Text")
    repo.save(post)
    repo.delete(post)
    assert repo.find_all() == []


def test_delete_leaves_other_posts(repo):
    repo.save(Post(id=1, title="a", text="b"))
    repo.save(Post(id=2, title="c", text="d"))
    repo.delete(Post(id=1))
    assert repo.find_all() == [Post(id=2, title="c", text="d")]


def test_duplicate_id_is_rejected(repo):
    repo.save(Post(id=3, title="x", text="y"))
    with pytest.raises(sqlite3.IntegrityError):
        repo.save(Post(id=3, title="z", text="w"))
    assert repo.find_all() == [Post(id=3, title="x", text="y")]


def test_new_repository_starts_empty(tmp_path):
    path = tmp_path / "posts.db"
    SQLiteRepository(path).save(Post(id=9, title="old", text="old"))
    assert SQLiteRepository(path).find_all() == []