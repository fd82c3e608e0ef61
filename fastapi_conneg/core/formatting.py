"""Render parsed media types back into header text."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from fastapi_conneg.schemas.media_type import MediaType


def format_quality(quality: float) -> str:
    return repr(quality)


def format_media_type(media_type: "MediaType") -> str:
    """Return ``type/subtype; key=value...`` with ``q`` appended last when not 1."""
    parts = [media_type.media_type]
    for key, value in media_type.params_without_quality().items():
        parts.append(f"{key}={value}")
    if media_type.quality != 1.0:
        parts.append(f"q={format_quality(media_type.quality)}")
    return "; ".join(parts)


def format_media_type_list(media_types: Iterable["MediaType"]) -> str:
    return ", ".join(format_media_type(media_type) for media_type in media_types)
