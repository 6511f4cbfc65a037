import json
from http import HTTPStatus

import pytest

from postboard.controller import PostController
from postboard.entity import Post
from postboard.repository import PostRepository, SQLiteRepository
from postboard.router import Request
from postboard.service import PostService

ID = 123
TITLE = "title 1"
TEXT = "text 1"


@pytest.fixture
def repo(tmp_path):
    return SQLiteRepository(tmp_path / "posts.db")


@pytest.fixture
def controller(repo):
    return PostController(PostService(repo))


class BrokenRepository(PostRepository):
    def save(self, post):
        raise OSError("disk gone")

    def find_all(self):
        raise OSError("disk gone")

    def delete(self, post):
        raise OSError("disk gone")


def test_add_post(controller, repo):
    body = json.dumps({"title": TITLE, "text": TEXT}).encode()
    response = controller.add_posts(Request("POST", "/posts", body))
    assert response.status == HTTPStatus.OK
    assert response.headers["Content-type"] == "application/json"
    post = json.loads(response.body)
    assert isinstance(post["id"], int)
    assert post["title"] == TITLE
    assert post["text"] == TEXT
    assert repo.find_all() == [Post(id=post["id"], title=TITLE, text=TEXT)]


def test_get_posts(controller, repo):
    repo.save(Post(id=ID, title=TITLE, text=TEXT))
    response = controller.get_posts(Request("GET", "/posts"))
    assert response.status == HTTPStatus.OK
    posts = json.loads(response.body)
    assert posts[0]["id"] == ID
    assert posts[0]["title"] == TITLE
    assert posts[0]["text"] == TEXT


def test_get_posts_empty(controller):
    response = controller.get_posts(Request("GET", "/posts"))
    assert json.loads(response.body) == []


@pytest.mark.parametrize(
    "body",
    [b"", b"not json", b"[1, 2]", b'{"title": ""}', b'{"title": 5}', b"null"],
)
def test_add_post_rejects_bad_bodies(controller, repo, body):
    response = controller.add_posts(Request("POST", "/posts", body))
    assert response.status == HTTPStatus.INTERNAL_SERVER_ERROR
    assert json.loads(response.body) == {"error": "error getting all posts data"}
    assert repo.find_all() == []


def test_repository_failures_become_server_errors():
    controller = PostController(PostService(BrokenRepository()))
    listed = controller.get_posts(Request("GET", "/posts"))
    added = controller.add_posts(Request("POST", "/posts", b'{"title": "t"}'))
    assert listed.status == HTTPStatus.INTERNAL_SERVER_ERROR
    assert added.status == HTTPStatus.INTERNAL_SERVER_ERROR