import pytest
from fastapi.testclient import TestClient

from examples.negotiation_example_app import app


@pytest.fixture
def client():
    return TestClient(app)


def test_json_by_default(client):
    response = client.get("/articles/1")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert response.json()["title"] == "Content negotiation"


def test_html_when_requested(client):
    response = client.get("/articles/1", headers={"accept": "text/html"})

    assert response.headers["content-type"].startswith("text/html")
    assert "<h1>Content negotiation</h1>" in response.text


def test_json_refused_falls_back_to_best_remaining(client):
    response = client.get("/articles/2", headers={"accept": "text/*, application/json; q=0"})

    assert response.headers["content-type"].startswith("text/html")


def test_plain_text(client):
    response = client.get("/articles/2", headers={"accept": "text/plain"})

    assert response.text.startswith("Quality values")


def test_not_acceptable(client):
    response = client.get("/articles/1", headers={"accept": "image/png"})

    assert response.status_code == 406


def test_create_requires_json(client):
    assert client.post("/articles", content=b"x", headers={"content-type": "text/plain"}).status_code == 415

    response = client.post("/articles", json={"title": "New", "body": "Text"})

    assert response.status_code == 201
    assert response.json()["title"] == "New"
