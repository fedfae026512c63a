"""HTTP server: routing, static files and the command-line entry point."""

from __future__ import annotations

import argparse
import logging
import mimetypes
import posixpath
import signal
import threading
from collections.abc import Callable, Iterable
from http import HTTPStatus
from pathlib import Path
from socketserver import ThreadingMixIn
from typing import Any
from wsgiref.simple_server import WSGIServer, make_server

from .api import ApiHandler
from .httpkit import Request, Response, error_response, redirect
from .kaiju import KaijuGenerator
from .sighting import Registry
from .storage import InMemoryStorage
from .web import WebHandler

log = logging.getLogger(__name__)

_STATIC_PREFIX = "/static/"
_SUBTREES = ("/sighting/", _STATIC_PREFIX)


def build_registry() -> Registry:
    """Registry holding every available creature generator."""
    registry = Registry()
    registry.register("kaiju", KaijuGenerator())
    return registry


class Application:
    """WSGI application routing requests to the API, web and static handlers."""

    def __init__(
        self,
        registry: Registry | None = None,
        storage: InMemoryStorage | None = None,
        static_dir: str | Path = "static",
    ) -> None:
        self.registry = registry if registry is not None else build_registry()
        self.storage = storage if storage is not None else InMemoryStorage()
        self.static_dir = Path(static_dir)
        self._api = ApiHandler(self.registry)
        self._web = WebHandler(self.registry, self.storage)
        self._routes: dict[str, Callable[[Request], Response]] = {
            "/sightings": self._web.handle_sightings,
            "/locations": self._web.handle_locations,
            "/categories": self._web.handle_categories,
            "/api/sighting": self._api.handle_sighting,
            "/api/categories": self._api.handle_categories,
        }

    def dispatch(self, request: Request) -> Response:
        """Route one request to its handler and return the response."""
        path = request.path
        if path + "/" in _SUBTREES:
            target = path + "/"
            if request.raw_query:
                target += "?" + request.raw_query
            return redirect(target, HTTPStatus.MOVED_PERMANENTLY)

        handler = self._routes.get(path)
        if handler is not None:
            return handler(request)
        if path.startswith("/sighting/"):
            return self._web.handle_sighting_detail(request)
        if path.startswith(_STATIC_PREFIX):
            return self._serve_static(path[len(_STATIC_PREFIX):])
        return self._web.handle_home(request)

    def _serve_static(self, relative: str) -> Response:
        cleaned = posixpath.normpath("/" + relative).lstrip("/")
        root = self.static_dir.resolve()
        candidate = (root / cleaned).resolve() if cleaned else root
        if candidate != root and root not in candidate.parents:
            return error_response("404 page not found", HTTPStatus.NOT_FOUND)
        if candidate.is_dir():
            candidate = candidate / "index.html"
        if not candidate.is_file():
            return error_response("404 page not found", HTTPStatus.NOT_FOUND)

        content_type, _ = mimetypes.guess_type(candidate.name)
        if content_type is None:
            content_type = "application/octet-stream"
        elif content_type.startswith("text/"):
            content_type += "; charset=utf-8"
        try:
            body = candidate.read_bytes()
        except OSError:
            return error_response("500 Internal Server Error", HTTPStatus.INTERNAL_SERVER_ERROR)
        return Response(HTTPStatus.OK, {"Content-Type": content_type}, body)

    def __call__(
        self, environ: dict[str, Any], start_response: Callable[..., Any]
    ) -> Iterable[bytes]:
        method = str(environ.get("REQUEST_METHOD", "GET")).upper()
        raw_path = environ.get("PATH_INFO", "") or "/"
        path = raw_path.encode("latin-1").decode("utf-8", "replace")
        request = Request(method, path, environ.get("QUERY_STRING", ""))

        response = self.dispatch(request)
        headers = list(response.headers.items())
        headers.append(("Content-Length", str(len(response.body))))
        start_response(f"{response.status} {response.reason}", headers)
        return [b"" if method == "HEAD" else response.body]


class _ThreadingWSGIServer(ThreadingMixIn, WSGIServer):
    daemon_threads = True


def main(argv: list[str] | None = None) -> int:
    """Run the server until interrupted; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="creature-sighting",
        description="Serve generated fictional creature sightings over HTTP.",
    )
    parser.add_argument("--host", default="", help="interface to bind (default: all)")
    parser.add_argument("--port", type=int, default=8080, help="port to listen on")
    parser.add_argument("--static-dir", default="static", help="static files directory")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    registry = build_registry()
    storage = InMemoryStorage()
    storage.generate_initial_sightings(registry)
    app = Application(registry, storage, args.static_dir)

    try:
        server = make_server(args.host, args.port, app, server_class=_ThreadingWSGIServer)
    except OSError as err:
        log.error("%s", err)
        return 1

    stop = threading.Event()
    received: list[int] = []

    def _on_signal(signum: int, _frame: Any) -> None:
        received.append(signum)
        stop.set()

    for sig in (signal.SIGINT, signal.SIGTERM):
        signal.signal(sig, _on_signal)

    thread = threading.Thread(target=server.serve_forever, daemon=True)
    log.info("Server starting on %s:%d", args.host, args.port)
    thread.start()

    while not stop.wait(0.5):
        if not thread.is_alive():
            server.server_close()
            log.error("server stopped unexpectedly")
            return 1

    log.info("Received signal: %s", signal.Signals(received[0]).name)
    server.shutdown()
    server.server_close()
    thread.join(timeout=5)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())