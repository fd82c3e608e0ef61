"""Request helpers for media-type negotiation."""

from .request import parse_headers, parse_request, parse_scope

__all__ = ["parse_headers", "parse_request", "parse_scope"]
