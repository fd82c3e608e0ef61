"""Extract media types from request headers."""

from __future__ import annotations

from typing import Any, Protocol

from starlette.datastructures import Headers
from starlette.requests import Request

from fastapi_conneg.core.errors import ParseError
from fastapi_conneg.core.parser import parse_list, parse_one
from fastapi_conneg.schemas.media_type import MediaType, MediaTypeList


class HeaderSource(Protocol):
    def get(self, key: str, default: Any = None) -> Any: ...

    def getlist(self, key: str) -> list[str]: ...


def parse_headers(headers: HeaderSource) -> tuple[MediaType | None, MediaTypeList]:
    """Return the parsed Content-Type and Accept list from ``headers``.

    Content-Type is a single value. Repeated Accept fields are joined with
    ``,`` before parsing, as folded header fields are equivalent to one
    comma-separated field.
    """
    try:
        content = parse_one(headers.get("content-type"))
    except ParseError as exc:
        exc.header = "Content-Type"
        raise
    try:
        accepts = parse_list(",".join(headers.getlist("accept")))
    except ParseError as exc:
        exc.header = "Accept"
        raise
    return content, accepts


def parse_request(request: Request) -> tuple[MediaType | None, MediaTypeList]:
    """Parse the Content-Type and Accept headers of a Starlette request."""
    return parse_headers(request.headers)


def parse_scope(scope: dict[str, Any]) -> tuple[MediaType | None, MediaTypeList]:
    """Parse the Content-Type and Accept headers of a raw ASGI scope."""
    return parse_headers(Headers(scope=scope))
