"""
Tests for the user HTTP API.
"""

import pytest
from fastapi.testclient import TestClient

from user_service.api.app import create_app
from user_service.api.dependencies import build_user_handler, get_user_handler
from user_service.database import create_db_engine


def test_create_then_get(client):
    """Create a user and read it back."""
    response = client.post("/api/v1/user/", json={"name": "Ada", "phone": "123"})
    assert response.status_code == 201
    assert response.json() == {"message": "User created successfully"}

    response = client.get("/api/v1/user/1")
    assert response.status_code == 200
    assert response.json() == {"id": 1, "name": "Ada", "phone": "123"}


def test_create_sets_location_header(client):
    """The created user's URL is returned in the Location header."""
    response = client.post("/api/v1/user/", json={"name": "Grace", "phone": "555"})
    assert response.status_code == 201

    location = response.headers["location"]
    fetched = client.get(location)
    assert fetched.status_code == 200
    assert fetched.json()["name"] == "Grace"
    assert fetched.json()["phone"] == "555"


def test_create_without_phone_stores_null(client):
    """Omitted phone is stored and returned as null."""
    response = client.post("/api/v1/user/", json={"name": "Linus"})
    assert response.status_code == 201

    response = client.get(response.headers["location"])
    assert response.status_code == 200
    assert response.json()["phone"] is None


def test_create_with_explicit_null_phone(client):
    response = client.post("/api/v1/user/", json={"name": "Barbara", "phone": None})
    assert response.status_code == 201


@pytest.mark.parametrize(
    "body",
    [
        b"",
        b"not json",
        b"[1, 2, 3]",
        b'{"phone": "123"}',
        b'{"name": 42}',
        b'{"name": null}',
    ],
)
def test_create_rejects_invalid_body(client, body):
    """Anything that does not parse as {name, phone?} is a 400 with a fixed message."""
    response = client.post(
        "/api/v1/user/",
        content=body,
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid input"}


def test_get_non_integer_id(client):
    """Non-integer id is rejected before lookup."""
    response = client.get("/api/v1/user/abc")
    assert response.status_code == 400
    assert response.json() == {"error": "invalid user id"}


def test_get_missing_user(client):
    """Unknown id returns 404 with the not-found message."""
    response = client.get("/api/v1/user/9999")
    assert response.status_code == 404
    assert response.json() == {"error": "user not found"}


def test_ids_are_assigned_in_sequence(client):
    first = client.post("/api/v1/user/", json={"name": "one"})
    second = client.post("/api/v1/user/", json={"name": "two"})
    assert first.headers["location"] == "/api/v1/user/1"
    assert second.headers["location"] == "/api/v1/user/2"


def test_malformed_requests_never_reach_the_store(engine, fake_store):
    """400 responses are produced without any store call."""
    app = create_app(engine=engine)
    app.dependency_overrides[get_user_handler] = lambda: build_user_handler(fake_store)

    with TestClient(app) as client:
        assert client.get("/api/v1/user/abc").status_code == 400
        assert client.get("/api/v1/user/1.5").status_code == 400
        assert client.post("/api/v1/user/", content=b"{").status_code == 400

    assert fake_store.calls == []


def test_store_failure_on_create_is_generic(engine, failing_store):
    """Create failures never expose the underlying cause."""
    app = create_app(engine=engine)
    app.dependency_overrides[get_user_handler] = lambda: build_user_handler(failing_store)

    with TestClient(app) as client:
        response = client.post("/api/v1/user/", json={"name": "Ada"})

    assert response.status_code == 500
    assert response.json() == {"error": "Could not create user"}


def test_store_failure_on_get_echoes_message(engine, failing_store):
    """Lookup failures are reported as 404 with the error message."""
    app = create_app(engine=engine)
    app.dependency_overrides[get_user_handler] = lambda: build_user_handler(failing_store)

    with TestClient(app) as client:
        response = client.get("/api/v1/user/1")

    assert response.status_code == 404
    assert response.json() == {"error": "connection refused"}


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/v1/unknown")
    assert response.status_code == 404
    assert "error" in response.json()


def test_app_creates_schema_on_startup():
    """Starting the app against an empty database creates the users table."""
    engine = create_db_engine("sqlite:///:memory:")
    with TestClient(create_app(engine=engine)) as client:
        response = client.post("/api/v1/user/", json={"name": "Ada"})
    engine.dispose()
    assert response.status_code == 201
