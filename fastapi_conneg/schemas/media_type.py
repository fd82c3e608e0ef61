"""Pydantic schemas for parsed media-type records."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from pydantic import BaseModel, ConfigDict

WILDCARD = "*"


class MediaType(BaseModel):
    """A single parsed media-type entry such as ``text/html; q=0.5``.

    Parameters are kept as ordered ``(key, value)`` pairs so records stay
    immutable and hashable; ``parameters`` gives a read-only mapping view.
    """

    model_config = ConfigDict(frozen=True)

    media_type: str
    type: str
    subtype: str
    params: tuple[tuple[str, str], ...] = ()
    quality: float = 1.0

    @property
    def parameters(self) -> Mapping[str, str]:
        return MappingProxyType(dict(self.params))

    @property
    def is_wildcard(self) -> bool:
        """Return True if either component is the wildcard token."""
        return self.type == WILDCARD or self.subtype == WILDCARD

    def params_without_quality(self) -> dict[str, str]:
        """Return parameters in parse order, minus the ``q`` weight."""
        return {key: value for key, value in self.params if key != "q"}

    def __str__(self) -> str:
        from fastapi_conneg.core.formatting import format_media_type

        return format_media_type(self)


class MediaTypeList(tuple):
    """Immutable ordered sequence of :class:`MediaType` records."""

    def __new__(cls, items: Iterable[MediaType] = ()) -> "MediaTypeList":
        return super().__new__(cls, items)

    def supports(self, candidate: MediaType) -> bool:
        """Return True if any entry in this list accepts ``candidate``."""
        from fastapi_conneg.core.negotiation import supports

        return supports(self, candidate)

    def preferred_match(self, options: Iterable[MediaType]) -> Optional[MediaType]:
        """Return the best of ``options`` supported by this list, or None."""
        from fastapi_conneg.core.negotiation import preferred_match

        return preferred_match(self, options)

    def __str__(self) -> str:
        from fastapi_conneg.core.formatting import format_media_type_list

        return format_media_type_list(self)

    def __repr__(self) -> str:
        return f"MediaTypeList({list(self)!r})"
