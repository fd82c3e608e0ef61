"""Negotiation settings loaded from the environment.

Every setting can be supplied as an environment variable prefixed with
``CONNEG_`` (for example ``CONNEG_PRODUCES='["application/json", "text/html"]'``)
or through a ``.env`` file.
"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fastapi_conneg.core.parser import parse_list
from fastapi_conneg.schemas.media_type import MediaTypeList


class NegotiationSettings(BaseSettings):
    """Media types a service produces and consumes.

    :param produces: Response media types offered, most preferred via ``q``
    :param consumes: Request body media types accepted
    :param body_methods: HTTP methods whose Content-Type is checked
    :param default_accept: Accept value assumed when the header is missing
    :param log_level: Level applied to the ``fastapi_conneg`` logger
    """

    model_config = SettingsConfigDict(
        env_prefix="CONNEG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    produces: list[str] = Field(default_factory=lambda: ["application/json"])
    consumes: list[str] = Field(default_factory=lambda: ["application/json"])
    body_methods: list[str] = Field(default_factory=lambda: ["POST", "PUT", "PATCH"])
    default_accept: str = "*/*"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @property
    def produces_list(self) -> MediaTypeList:
        return parse_list(",".join(self.produces))

    @property
    def consumes_list(self) -> MediaTypeList:
        return parse_list(",".join(self.consumes))

    def configure_logging(self) -> None:
        logging.getLogger("fastapi_conneg").setLevel(self.log_level)


@lru_cache
def get_settings() -> NegotiationSettings:
    return NegotiationSettings()
