"""
Shared fixtures for the API tests.

The application is built with an in-memory DocumentStore so tests run
without a MongoDB server.
"""

from typing import Dict

import pytest
from fastapi.testclient import TestClient

from washlava.core.security import issue_token
from washlava.core.setting import Settings
from washlava.main import create_app
from tests.fakes import InMemoryCollection, InMemoryStore


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, ACCESS_TOKEN_SECRET="test-secret")


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def client(settings, store):
    with TestClient(create_app(settings, store)) as test_client:
        yield test_client


@pytest.fixture
def users(store) -> InMemoryCollection:
    return store.collection("users")


@pytest.fixture
def services(store) -> InMemoryCollection:
    return store.collection("services")


@pytest.fixture
def carts(store) -> InMemoryCollection:
    return store.collection("carts")


@pytest.fixture
def reviews(store) -> InMemoryCollection:
    return store.collection("reviews")


@pytest.fixture
def auth_header(settings):
    """Build an Authorization header for ``email``."""
    def _auth_header(email: str) -> Dict[str, str]:
        return {"Authorization": f"Bearer {issue_token({'email': email}, settings)}"}
    return _auth_header


@pytest.fixture
def admin_headers(users, auth_header) -> Dict[str, str]:
    users.seed({"email": "admin@washlava.com", "role": "admin"})
    return auth_header("admin@washlava.com")


@pytest.fixture
def member_headers(users, auth_header) -> Dict[str, str]:
    users.seed({"email": "member@washlava.com", "role": "member"})
    return auth_header("member@washlava.com")
