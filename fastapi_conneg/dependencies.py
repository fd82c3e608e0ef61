"""FastAPI dependencies for per-route negotiation."""

import logging
from typing import Iterable

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fastapi_conneg.core.errors import (
    ErrorBuilder,
    NegotiationError,
    NotAcceptable,
    ParseError,
    UnsupportedMediaType,
)
from fastapi_conneg.core.negotiation import DEFAULT_ACCEPT, preferred_match, supports
from fastapi_conneg.core.parser import parse_list
from fastapi_conneg.schemas.media_type import MediaType
from fastapi_conneg.utils.request import parse_request

logger = logging.getLogger(__name__)


class AcceptNegotiator:
    """Dependency returning the response media type chosen for a request.

    Example::

        negotiate_article = AcceptNegotiator(["application/json", "text/html; q=0.9"])

        @app.get("/articles/{article_id}")
        async def get_article(media_type: MediaType = Depends(negotiate_article)):
            ...
    """

    def __init__(self, produces: Iterable[str], default_accept: str = DEFAULT_ACCEPT) -> None:
        self.produces = parse_list(",".join(produces))
        self.default_accept = parse_list(default_accept)

    async def __call__(self, request: Request) -> MediaType:
        _, accepts = parse_request(request)
        chosen = preferred_match(accepts or self.default_accept, self.produces)
        if chosen is None:
            raise NotAcceptable(f"None of {self.produces} is acceptable")
        request.state.negotiated_media_type = chosen
        return chosen


class ContentTypeValidator:
    """Dependency returning the request media type if it can be consumed."""

    def __init__(self, consumes: Iterable[str]) -> None:
        self.consumes = parse_list(",".join(consumes))

    async def __call__(self, request: Request) -> MediaType | None:
        content, _ = parse_request(request)
        if content is not None and not supports(self.consumes, content):
            raise UnsupportedMediaType(f"Cannot consume {content.media_type}")
        request.state.request_media_type = content
        return content


def install_exception_handlers(app: FastAPI) -> None:
    """Render negotiation failures raised by routes as error documents."""
    error_builder = ErrorBuilder()

    async def handle(request: Request, exc: Exception) -> JSONResponse:
        logger.debug("Negotiation failed for %s: %s", request.url.path, exc)
        status_code, document = error_builder.from_exception(exc)
        return JSONResponse(document, status_code=status_code)

    app.add_exception_handler(ParseError, handle)
    app.add_exception_handler(NegotiationError, handle)
