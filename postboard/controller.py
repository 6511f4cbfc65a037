"""HTTP handlers for posts."""

from __future__ import annotations

import json
import logging
from http import HTTPStatus
from typing import Any

from postboard.entity import Post
from postboard.router import Request, Response
from postboard.service import PostService

logger = logging.getLogger(__name__)

_ERROR_MESSAGE = "error getting all posts data"


def _json_response(payload: Any, status: int = HTTPStatus.OK) -> Response:
    body = (json.dumps(payload) + "\n").encode("utf-8")
    return Response(status, body, {"Content-type": "application/json"})


def _error_response() -> Response:
    return _json_response({"error": _ERROR_MESSAGE}, HTTPStatus.INTERNAL_SERVER_ERROR)


class PostController:
    """Turns HTTP requests into calls on a post service."""

    def __init__(self, service: PostService) -> None:
        self._service = service

    def get_posts(self, request: Request) -> Response:
        """Return every post as a JSON array."""
        try:
            posts = self._service.find_all()
        except Exception:
            logger.exception("listing posts failed")
            return _error_response()
        return _json_response([post.to_dict() for post in posts])

    def add_posts(self, request: Request) -> Response:
        """Create a post from the JSON body and return it."""
        try:
            post = Post.from_dict(json.loads(request.body))
            self._service.validate(post)
            result = self._service.create(post)
        except Exception:
            logger.exception("adding a post failed")
            return _error_response()
        return _json_response(result.to_dict())