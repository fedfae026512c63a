"""Small request and response types shared by the HTTP handlers."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any
from urllib.parse import parse_qs, urlsplit

from .pages import _escape

_JSON_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


@dataclass(frozen=True)
class Request:
    """An incoming HTTP request: method, path and raw query string."""

    method: str = "GET"
    path: str = "/"
    raw_query: str = ""

    @classmethod
    def from_target(cls, method: str, target: str) -> Request:
        """Build a request from a method and a request target such as '/a?b=c'."""
        parts = urlsplit(target)
        return cls(method, parts.path or "/", parts.query)

    def param(self, name: str) -> str:
        """First value of a query parameter, or an empty string."""
        values = parse_qs(self.raw_query, keep_blank_values=True).get(name)
        return values[0] if values else ""


@dataclass
class Response:
    """An HTTP response ready to be written out."""

    status: int = HTTPStatus.OK
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def __post_init__(self) -> None:
        self.status = int(self.status)

    @property
    def text(self) -> str:
        """The body decoded as UTF-8."""
        return self.body.decode("utf-8")

    @property
    def reason(self) -> str:
        """Standard reason phrase for the status code."""
        try:
            return HTTPStatus(self.status).phrase
        except ValueError:
            return ""


def error_response(message: str, status: int) -> Response:
    """Plain-text error reply carrying the message on one line."""
    return Response(
        status,
        {
            "Content-Type": "text/plain; charset=utf-8",
            "X-Content-Type-Options": "nosniff",
        },
        (message + "\n").encode("utf-8"),
    )


def json_response(payload: Any) -> Response:
    """Compact JSON reply, HTML-sensitive characters escaped, newline-terminated."""
    text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    body = text.translate(_JSON_ESCAPES) + "\n"
    return Response(
        HTTPStatus.OK, {"Content-Type": "application/json"}, body.encode("utf-8")
    )


def html_response(body: str) -> Response:
    """HTML reply."""
    return Response(
        HTTPStatus.OK,
        {"Content-Type": "text/html; charset=utf-8"},
        body.encode("utf-8"),
    )


def redirect(location: str, status: int = HTTPStatus.SEE_OTHER) -> Response:
    """Redirect to another location with a short HTML link as body."""
    phrase = HTTPStatus(status).phrase
    body = f'<a href="{_escape(location)}">{phrase}</a>.\n'
    return Response(
        status,
        {"Location": location, "Content-Type": "text/html; charset=utf-8"},
        body.encode("utf-8"),
    )