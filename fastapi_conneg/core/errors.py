"""Negotiation exceptions and error object builders."""

from typing import Any


class ParseError(ValueError):
    """Raised when header text is not a well-formed media-type expression."""

    message = "Malformed media type"

    def __init__(self, value: str, header: str | None = None) -> None:
        self.value = value
        self.header = header
        super().__init__(f"{self.message} [{value}]")


class InvalidMediaType(ParseError):
    """The type/subtype segment does not have exactly one separator."""

    message = "Invalid content type"


class MalformedParameter(ParseError):
    """A parameter segment does not have exactly one ``=``."""

    message = "Malformed parameter"


class MalformedQuality(ParseError):
    """The ``q`` parameter is not a floating-point number."""

    message = "Malformed quality"


class NegotiationError(Exception):
    """Protocol-level negotiation failure carrying an HTTP status."""

    status_code = 400
    title = "Bad Request"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        super().__init__(detail or self.title)


class NotAcceptable(NegotiationError):
    status_code = 406
    title = "Not Acceptable"


class UnsupportedMediaType(NegotiationError):
    status_code = 415
    title = "Unsupported Media Type"


class ErrorBuilder:
    """Build error objects and error documents for negotiation failures."""

    def error_object(
        self,
        *,
        status: str | None = None,
        code: str | None = None,
        title: str | None = None,
        detail: str | None = None,
        source: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return an error object."""
        error: dict[str, Any] = {}
        if status is not None:
            error["status"] = status
        if code is not None:
            error["code"] = code
        if title is not None:
            error["title"] = title
        if detail is not None:
            error["detail"] = detail
        if source is not None:
            error["source"] = source
        if meta is not None:
            error["meta"] = meta
        if not error:
            raise ValueError("Error object must include at least one field.")
        return error

    def error_document(self, errors: list[dict[str, Any]]) -> dict[str, Any]:
        """Return a document with an errors array."""
        return {"errors": errors}

    def from_exception(self, exc: Exception) -> tuple[int, dict[str, Any]]:
        """Map an exception to ``(status_code, error document)``."""
        if isinstance(exc, ParseError):
            error = self.error_object(
                status="400",
                code=type(exc).__name__,
                title="Bad Request",
                detail=str(exc),
                source={"header": exc.header} if exc.header else None,
            )
            return 400, self.error_document([error])
        if isinstance(exc, NegotiationError):
            error = self.error_object(
                status=str(exc.status_code),
                title=exc.title,
                detail=exc.detail,
            )
            return exc.status_code, self.error_document([error])
        error = self.error_object(
            status="500",
            title="Internal Server Error",
            detail=str(exc),
        )
        return 500, self.error_document([error])
