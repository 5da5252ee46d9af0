"""
pytest configuration and fixtures.

Every test gets its own application around a freshly seeded store, so
mutations made by one test never leak into another.
"""

import pytest
from fastapi.testclient import TestClient

from mock_users_api.app.main import create_app
from mock_users_api.app.services.user_service import UserStore


@pytest.fixture
def store() -> UserStore:
    """User store seeded with the seven default users."""
    return UserStore()


@pytest.fixture
def app(store):
    return create_app(user_store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
