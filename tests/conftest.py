import pytest

from fastapi_conneg.config import get_settings
from fastapi_conneg.core.parser import parse_list

ACCEPT = "text/plain; q=0.5, text/html, text/x-dvi; q=0.8, text/x-c"


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate settings from the developer's environment and .env file."""
    for name in ("PRODUCES", "CONSUMES", "BODY_METHODS", "DEFAULT_ACCEPT", "LOG_LEVEL"):
        monkeypatch.delenv(f"CONNEG_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def accept_list():
    return parse_list(ACCEPT)
