"""
Tests for application wiring: error mapping, health and lifecycle hooks.
"""

import pytest
from fastapi.testclient import TestClient

from washlava.core.setting import Settings
from washlava.main import create_app
from tests.fakes import FailingStore


@pytest.fixture
def failing_client(settings):
    with TestClient(create_app(settings, FailingStore())) as test_client:
        yield test_client


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == "Washlava is running"


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_health_reports_unavailable_store(settings, store):
    app = create_app(settings, store)
    # startup not run, so the store never connected
    response = TestClient(app).get("/health")
    assert response.status_code == 503
    assert response.json() == {"message": "Database unavailable"}


def test_store_connected_on_startup_and_closed_on_shutdown(settings, store):
    with TestClient(create_app(settings, store)):
        assert store.connected
        assert not store.closed
    assert store.closed


@pytest.mark.parametrize("method,path,body", [
    ("get", "/services", None),
    ("post", "/users", {"email": "a@x.com"}),
    ("post", "/carts", {"email": "a@x.com"}),
    ("delete", "/carts/663f1c2e9b1e8a3d4c5b6a79", None),
    ("post", "/reviews", {"reviewerName": "Ann"}),
    ("get", "/reviews/Ann", None),
])
def test_store_fault_is_generic_500(failing_client, method, path, body):
    kwargs = {"json": body} if body is not None else {}
    response = failing_client.request(method.upper(), path, **kwargs)
    assert response.status_code == 500
    assert response.json() == {"message": "Internal Server Error"}
    assert "connection reset" not in response.text


def test_store_fault_during_admin_check_is_500(failing_client, auth_header):
    response = failing_client.get("/users", headers=auth_header("admin@washlava.com"))
    assert response.status_code == 500


def test_unknown_route_uses_message_body(client):
    response = client.get("/does-not-exist")
    assert response.status_code == 404
    assert "message" in response.json()


def test_request_logging_header(client):
    response = client.get("/services")
    assert "x-process-time" in response.headers


def test_unexpected_exception_is_generic_500(settings, store):
    app = create_app(settings, store)

    @app.get("/explode")
    async def explode():
        raise RuntimeError("secret detail")

    with TestClient(app, raise_server_exceptions=False) as test_client:
        response = test_client.get("/explode")
    assert response.status_code == 500
    assert response.json() == {"message": "Internal Server Error"}
    assert "secret detail" not in response.text


def test_docs_served_outside_production(client):
    assert client.get("/docs").status_code == 200
    assert client.get("/openapi.json").status_code == 200


def test_docs_hidden_in_production(store):
    settings = Settings(_env_file=None, ACCESS_TOKEN_SECRET="test-secret", ENV_SETTING="production")
    with TestClient(create_app(settings, store)) as test_client:
        assert test_client.get("/docs").status_code == 404
        assert test_client.get("/openapi.json").status_code == 404
