"""A small method-aware HTTP router and its server."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)


@dataclass
class Request:
    """An incoming HTTP request."""

    method: str
    path: str
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)


@dataclass
class Response:
    """An outgoing HTTP response."""

    status: int = HTTPStatus.OK
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)


Handler = Callable[[Request], Response]


class MuxRouter:
    """Routes requests by exact path and method and serves them over HTTP."""

    def __init__(self, stop: threading.Event) -> None:
        self._stop = stop
        self._routes: dict[str, dict[str, Handler]] = {}

    def _add(self, method: str, uri: str, handler: Handler) -> None:
        self._routes.setdefault(uri, {})[method] = handler

    def get(self, uri: str, handler: Handler) -> None:
        """Route GET requests for the path to the handler."""
        self._add("GET", uri, handler)

    def post(self, uri: str, handler: Handler) -> None:
        """Route POST requests for the path to the handler."""
        self._add("POST", uri, handler)

    def dispatch(self, request: Request) -> Response:
        """Return the response of the handler that matches the request."""
        methods = self._routes.get(request.path)
        if methods is None:
            return Response(
                HTTPStatus.NOT_FOUND,
                b"404 page not found\n",
                {"Content-Type": "text/plain; charset=utf-8"},
            )
        handler = methods.get(request.method.upper())
        if handler is None:
            return Response(HTTPStatus.METHOD_NOT_ALLOWED)
        return handler(request)

    def serve(self, port: str) -> None:
        """Serve on "host:port" until the stop event is set, then shut down."""
        print(f"Mux HTTP server running on port: {port}")
        host, _, number = port.rpartition(":")
        server: ThreadingHTTPServer | None = None
        try:
            server = ThreadingHTTPServer((host, int(number)), self._request_handler())
        except (OSError, ValueError) as exc:
            print(f"Error starting server: {exc}")
        else:
            threading.Thread(target=server.serve_forever, daemon=True).start()

        while not self._stop.wait(0.5):
            pass

        print("Shutting down server...")
        if server is not None:
            server.shutdown()
            server.server_close()
        print("Server exiting")

    def _request_handler(self) -> type[BaseHTTPRequestHandler]:
        router = self

        class _Handler(BaseHTTPRequestHandler):
            def _respond(self) -> None:
                length = int(self.headers.get("Content-Length") or 0)
                body = self.rfile.read(length) if length else b""
                request = Request(
                    method=self.command,
                    path=urlsplit(self.path).path,
                    body=body,
                    headers=dict(self.headers.items()),
                )
                response = router.dispatch(request)
                self.send_response(response.status)
                for name, value in response.headers.items():
                    self.send_header(name, value)
                self.send_header("Content-Length", str(len(response.body)))
                self.end_headers()
                if self.command != "HEAD":
                    self.wfile.write(response.body)

            do_GET = do_POST = do_PUT = do_DELETE = do_PATCH = do_HEAD = _respond

            def log_message(self, format: str, *args: object) -> None:
                logger.debug(format, *args)

        return _Handler