"""Error handling middleware for negotiation failures."""

import logging
from typing import Any

from starlette.responses import JSONResponse

from fastapi_conneg.core.errors import ErrorBuilder, NegotiationError, ParseError

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware:
    """Convert exceptions into error documents.

    Errors raised after the response has started are re-raised, since a
    second response cannot be sent.
    """

    def __init__(self, app: Any) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app
        self.error_builder = ErrorBuilder()

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Handle exceptions and serialize error documents."""
        response_started = False

        async def send_wrapper(message: dict[str, Any]) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except (ParseError, NegotiationError) as exc:
            if response_started:
                raise
            status_code, document = self.error_builder.from_exception(exc)
            await JSONResponse(document, status_code=status_code)(scope, receive, send)
        except Exception as exc:  # noqa: BLE001 - last-resort handler
            logger.exception("Unhandled error while serving %s", scope.get("path"))
            if response_started:
                raise
            status_code, document = self.error_builder.from_exception(exc)
            await JSONResponse(document, status_code=status_code)(scope, receive, send)
