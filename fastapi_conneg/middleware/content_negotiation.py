"""Content negotiation middleware."""

import logging
from typing import Any, Iterable

from starlette.responses import JSONResponse

from fastapi_conneg.config import NegotiationSettings, get_settings
from fastapi_conneg.core.errors import (
    ErrorBuilder,
    NegotiationError,
    NotAcceptable,
    ParseError,
    UnsupportedMediaType,
)
from fastapi_conneg.core.negotiation import preferred_match, supports
from fastapi_conneg.core.parser import parse_list
from fastapi_conneg.utils.request import parse_scope

logger = logging.getLogger(__name__)


class ContentNegotiationMiddleware:
    """Negotiate the response media type and validate request bodies.

    The chosen type is stored in ``request.state.negotiated_media_type``.
    """

    def __init__(
        self,
        app: Any,
        settings: NegotiationSettings | None = None,
        *,
        produces: Iterable[str] | None = None,
        consumes: Iterable[str] | None = None,
    ) -> None:
        """Store the ASGI app and parse the configured media types."""
        self.app = app
        self.settings = settings or get_settings()
        self.produces = parse_list(",".join(produces)) if produces is not None else self.settings.produces_list
        self.consumes = parse_list(",".join(consumes)) if consumes is not None else self.settings.consumes_list
        self.default_accept = parse_list(self.settings.default_accept)
        self.body_methods = {method.upper() for method in self.settings.body_methods}
        self.error_builder = ErrorBuilder()

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Validate headers before passing to downstream app."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        try:
            content, accepts = parse_scope(scope)
        except ParseError as exc:
            logger.debug("Rejecting malformed %s header: %s", exc.header, exc)
            await self._reject(exc, scope, receive, send)
            return

        method = scope.get("method", "").upper()
        if method in self.body_methods and content is not None:
            if not supports(self.consumes, content):
                await self._reject(
                    UnsupportedMediaType(f"Cannot consume {content.media_type}"),
                    scope,
                    receive,
                    send,
                )
                return

        chosen = preferred_match(accepts or self.default_accept, self.produces)
        if chosen is None:
            await self._reject(
                NotAcceptable(f"None of {self.produces} is acceptable"),
                scope,
                receive,
                send,
            )
            return

        state = scope.setdefault("state", {})
        state["negotiated_media_type"] = chosen
        state["request_media_type"] = content
        state["accepted_media_types"] = accepts
        await self.app(scope, receive, send)

    async def _reject(
        self, exc: ParseError | NegotiationError, scope: dict[str, Any], receive: Any, send: Any
    ) -> None:
        status_code, document = self.error_builder.from_exception(exc)
        response = JSONResponse(document, status_code=status_code)
        await response(scope, receive, send)
