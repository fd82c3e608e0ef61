import logging

import pytest

from fastapi_conneg.config import NegotiationSettings, get_settings
from fastapi_conneg.core.errors import ParseError


def test_defaults():
    settings = NegotiationSettings()

    assert settings.produces == ["application/json"]
    assert settings.consumes == ["application/json"]
    assert settings.body_methods == ["POST", "PUT", "PATCH"]
    assert settings.default_accept == "*/*"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CONNEG_PRODUCES", '["text/html", "application/json; q=0.5"]')
    monkeypatch.setenv("CONNEG_DEFAULT_ACCEPT", "text/*")

    settings = get_settings()

    assert [media_type.media_type for media_type in settings.produces_list] == [
        "text/html",
        "application/json",
    ]
    assert settings.produces_list[1].quality == 0.5
    assert settings.default_accept == "text/*"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_misconfigured_media_type_fails_loudly():
    settings = NegotiationSettings(consumes=["json"])

    with pytest.raises(ParseError):
        settings.consumes_list


def test_configure_logging():
    NegotiationSettings(log_level="DEBUG").configure_logging()

    assert logging.getLogger("fastapi_conneg").level == logging.DEBUG
    logging.getLogger("fastapi_conneg").setLevel(logging.NOTSET)
