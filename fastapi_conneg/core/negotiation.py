"""Match client preferences against server-offered media types."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from fastapi_conneg.core.parser import parse_list
from fastapi_conneg.schemas.media_type import WILDCARD, MediaType

logger = logging.getLogger(__name__)

DEFAULT_ACCEPT = "*/*"


def supports(server_list: Iterable[MediaType], candidate: MediaType) -> bool:
    """Return True if an entry in ``server_list`` accepts ``candidate``.

    An entry matches when its type and subtype are each the wildcard or equal
    to the candidate's. Entries with quality exactly 0 never match.
    """
    for support in server_list:
        if support.type != WILDCARD and support.type != candidate.type:
            continue
        if support.subtype != WILDCARD and support.subtype != candidate.subtype:
            continue
        if support.quality == 0:
            continue
        return True
    return False


def preferred_match(
    server_list: Sequence[MediaType], options: Iterable[MediaType]
) -> MediaType | None:
    """Choose the highest quality option supported by ``server_list``.

    Ranking uses each option's own quality. Among options tied at the
    highest quality, the last one in ``options`` order wins.
    """
    candidates = [option for option in options if supports(server_list, option)]
    if not candidates:
        return None
    # sorted() is stable
    candidates = sorted(candidates, key=lambda candidate: candidate.quality)
    return candidates[-1]


def negotiate(accept: str | None, offered: str | Sequence[MediaType]) -> MediaType | None:
    """Parse an Accept value and pick the preferred ``offered`` type.

    A blank Accept value means any type is acceptable.
    """
    accepted = parse_list(accept if accept and accept.strip() else DEFAULT_ACCEPT)
    options = parse_list(offered) if isinstance(offered, str) else offered
    match = preferred_match(accepted, options)
    if match is None:
        logger.debug("No acceptable media type for Accept %r", accept)
    else:
        logger.debug("Negotiated %s for Accept %r", match.media_type, accept)
    return match
