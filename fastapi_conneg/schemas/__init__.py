"""Pydantic schemas for media-type negotiation."""

from .media_type import WILDCARD, MediaType, MediaTypeList

__all__ = ["WILDCARD", "MediaType", "MediaTypeList"]
