"""Serve the quiz website over HTTP on the local machine."""

from __future__ import annotations

import logging
import os
import sys
from functools import partial
from http import HTTPStatus
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit

PORT = 8000
ROOT_REDIRECT = "/rust-quiz/"

_log = logging.getLogger(__name__)


class QuizRequestHandler(SimpleHTTPRequestHandler):
    """Static file handler that redirects the bare root to the quiz page."""

    def _is_root(self) -> bool:
        return urlsplit(self.path).path == "/"

    def _redirect_root(self) -> None:
        self.send_response(HTTPStatus.MOVED_PERMANENTLY)
        self.send_header("Location", ROOT_REDIRECT)
        self.send_header("Content-Length", "0")
        self.end_headers()

    def do_GET(self) -> None:
        if self._is_root():
            self._redirect_root()
        else:
            super().do_GET()

    def do_HEAD(self) -> None:
        if self._is_root():
            self._redirect_root()
        else:
            super().do_HEAD()

    def log_message(self, format: str, *args: object) -> None:
        """Send request logs to the module logger instead of stderr."""
        _log.debug("%s - %s", self.address_string(), format % args)


def make_server(
    host: str = "127.0.0.1",
    port: int = PORT,
    directory: str | os.PathLike[str] = ".",
) -> ThreadingHTTPServer:
    """Bind a server that serves ``directory``."""
    handler = partial(QuizRequestHandler, directory=os.fspath(directory))
    return ThreadingHTTPServer((host, port), handler)


def serve(port: int = PORT, directory: str | os.PathLike[str] = ".") -> None:
    """Serve the website on localhost until interrupted."""
    with make_server("127.0.0.1", port, directory) as server:
        print(f"Quiz server running on http://localhost:{port}/ ...", file=sys.stderr)
        server.serve_forever()