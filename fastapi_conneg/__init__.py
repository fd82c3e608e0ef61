"""HTTP content-type negotiation for FastAPI and Starlette."""

from .core.errors import (
    InvalidMediaType,
    MalformedParameter,
    MalformedQuality,
    NegotiationError,
    NotAcceptable,
    ParseError,
    UnsupportedMediaType,
)
from .core.negotiation import negotiate, preferred_match, supports
from .core.parser import parse_list, parse_one
from .schemas.media_type import MediaType, MediaTypeList
from .utils.request import parse_request

__all__ = [
    "InvalidMediaType",
    "MalformedParameter",
    "MalformedQuality",
    "MediaType",
    "MediaTypeList",
    "NegotiationError",
    "NotAcceptable",
    "ParseError",
    "UnsupportedMediaType",
    "negotiate",
    "parse_list",
    "parse_one",
    "parse_request",
    "preferred_match",
    "supports",
]
