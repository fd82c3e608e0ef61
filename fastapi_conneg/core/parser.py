"""Parse media-type expressions from Content-Type and Accept header text."""

from __future__ import annotations

import math

from fastapi_conneg.core.errors import InvalidMediaType, MalformedParameter, MalformedQuality
from fastapi_conneg.schemas.media_type import MediaType, MediaTypeList

DEFAULT_QUALITY = 1.0


def _parse_quality(value: str) -> float:
    # float() is looser than the qvalue grammar
    if "_" in value:
        raise MalformedQuality(value)
    try:
        quality = float(value)
    except ValueError:
        raise MalformedQuality(value) from None
    if not math.isfinite(quality):
        raise MalformedQuality(value)
    return quality


def parse_one(text: str | None) -> MediaType | None:
    """Parse a single media-type expression such as ``text/html; q=0.5``.

    Blank input yields ``None`` so callers can drop empty list segments.
    Quality values are not range-checked.
    """
    if text is None or not text.strip():
        return None

    components = text.split(";")
    media_type = components[0].strip()
    type_parts = media_type.split("/")
    if len(type_parts) != 2 or not all(type_parts):
        raise InvalidMediaType(media_type)

    parameters: dict[str, str] = {}
    quality = DEFAULT_QUALITY
    for param in components[1:]:
        values = param.split("=")
        if len(values) != 2:
            raise MalformedParameter(param)
        key = values[0].strip()
        value = values[1].strip()
        parameters[key] = value
        if key == "q":
            quality = _parse_quality(value)

    return MediaType(
        media_type=media_type,
        type=type_parts[0],
        subtype=type_parts[1],
        params=tuple(parameters.items()),
        quality=quality,
    )


def parse_list(text: str | None) -> MediaTypeList:
    """Parse a comma-separated list of media types, preserving order.

    Empty segments are skipped. The first malformed segment aborts the
    whole parse and its error propagates.
    """
    if not text:
        return MediaTypeList()
    entries = []
    for segment in text.split(","):
        entry = parse_one(segment)
        if entry is not None:
            entries.append(entry)
    return MediaTypeList(entries)
