"""The posts web application."""

from __future__ import annotations

import argparse
import signal
import threading
from collections.abc import Sequence
from os import PathLike

from postboard.controller import PostController
from postboard.repository import SQLiteRepository
from postboard.router import MuxRouter, Request, Response
from postboard.service import PostService


def _index(request: Request) -> Response:
    return Response(body=b"Up and running...\n")


def build_router(repository_path: str | PathLike[str], stop: threading.Event) -> MuxRouter:
    """Wire the repository, service and controller into a router."""
    repository = SQLiteRepository(repository_path)
    controller = PostController(PostService(repository))
    router = MuxRouter(stop)
    router.get("/", _index)
    router.get("/posts", controller.get_posts)
    router.post("/posts", controller.add_posts)
    return router


def main(argv: Sequence[str] | None = None) -> int:
    """Serve the application until interrupted."""
    parser = argparse.ArgumentParser(prog="postboard", description="Serve the posts API.")
    parser.add_argument("--port", default=":8080", help="address to listen on (default :8080)")
    parser.add_argument("--db", default="posts.db", help="SQLite database file (default posts.db)")
    args = parser.parse_args(argv)

    stop = threading.Event()
    signal.signal(signal.SIGINT, lambda signum, frame: stop.set())
    build_router(args.db, stop).serve(args.port)
    return 0