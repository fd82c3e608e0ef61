import pytest
from starlette.datastructures import Headers
from starlette.requests import Request

from fastapi_conneg.core.errors import InvalidMediaType, MalformedParameter
from fastapi_conneg.utils.request import parse_headers, parse_request, parse_scope


def make_scope(*headers):
    return {
        "type": "http",
        "method": "GET",
        "path": "/",
        "headers": [(name.lower().encode(), value.encode()) for name, value in headers],
    }


def test_accept_only():
    content, accepts = parse_headers(Headers(raw=[(b"accept", b"text/plain")]))

    assert content is None
    assert len(accepts) == 1
    assert accepts[0].media_type == "text/plain"


def test_content_type_and_accept():
    content, accepts = parse_request(
        Request(make_scope(("Accept", "text/plain"), ("Content-Type", "application/json")))
    )

    assert content.media_type == "application/json"
    assert [media_type.media_type for media_type in accepts] == ["text/plain"]


def test_repeated_accept_headers_are_joined():
    _, accepts = parse_scope(
        make_scope(("accept", "text/html"), ("accept", "application/json; q=0.5, text/plain"))
    )

    assert [media_type.media_type for media_type in accepts] == [
        "text/html",
        "application/json",
        "text/plain",
    ]
    assert accepts[1].quality == 0.5


def test_no_headers():
    content, accepts = parse_scope(make_scope())

    assert content is None
    assert len(accepts) == 0


def test_empty_content_type_is_absent():
    content, _ = parse_scope(make_scope(("content-type", "")))

    assert content is None


def test_malformed_content_type_names_header():
    with pytest.raises(MalformedParameter) as excinfo:
        parse_scope(make_scope(("content-type", "text/html; charset")))

    assert excinfo.value.header == "Content-Type"


def test_malformed_accept_names_header():
    with pytest.raises(InvalidMediaType) as excinfo:
        parse_scope(make_scope(("accept", "text/html"), ("accept", "json")))

    assert excinfo.value.header == "Accept"
