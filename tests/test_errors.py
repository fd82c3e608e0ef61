import pytest

from fastapi_conneg.core.errors import (
    ErrorBuilder,
    MalformedParameter,
    NotAcceptable,
    UnsupportedMediaType,
)


def test_error_object_requires_a_field():
    with pytest.raises(ValueError):
        ErrorBuilder().error_object()


def test_error_object_keeps_given_fields():
    error = ErrorBuilder().error_object(status="406", title="Not Acceptable", meta={"offered": []})

    assert error == {"status": "406", "title": "Not Acceptable", "meta": {"offered": []}}


def test_parse_error_maps_to_bad_request():
    status_code, document = ErrorBuilder().from_exception(MalformedParameter("charset", header="Accept"))

    assert status_code == 400
    assert document == {
        "errors": [
            {
                "status": "400",
                "code": "MalformedParameter",
                "title": "Bad Request",
                "detail": "Malformed parameter [charset]",
                "source": {"header": "Accept"},
            }
        ]
    }


@pytest.mark.parametrize(
    "exc, status_code",
    [(NotAcceptable("nothing fits"), 406), (UnsupportedMediaType(), 415), (RuntimeError("x"), 500)],
)
def test_from_exception_status(exc, status_code):
    status, document = ErrorBuilder().from_exception(exc)

    assert status == status_code
    assert document["errors"][0]["status"] == str(status_code)
