"""Core media-type parsing and negotiation."""

from .errors import (
    ErrorBuilder,
    InvalidMediaType,
    MalformedParameter,
    MalformedQuality,
    NegotiationError,
    NotAcceptable,
    ParseError,
    UnsupportedMediaType,
)
from .formatting import format_media_type, format_media_type_list
from .negotiation import negotiate, preferred_match, supports
from .parser import parse_list, parse_one

__all__ = [
    "ErrorBuilder",
    "InvalidMediaType",
    "MalformedParameter",
    "MalformedQuality",
    "NegotiationError",
    "NotAcceptable",
    "ParseError",
    "UnsupportedMediaType",
    "format_media_type",
    "format_media_type_list",
    "negotiate",
    "parse_list",
    "parse_one",
    "preferred_match",
    "supports",
]
