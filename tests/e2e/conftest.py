"""Shared fixtures for end-to-end API tests."""

import pytest
from fastapi.testclient import TestClient

from lending.domain.value import UserRole
from lending.interface.api.app import create_app
from lending.interface.api.auth import AUTH_COOKIE
from tests.di import build_test_container
from tests.factories import make_user, token_for


@pytest.fixture
def client():
    """Create test client backed by in-memory persistence."""
    return TestClient(create_app(build_test_container()))


@pytest.fixture
def admin_token() -> str:
    """Session token carrying the admin role."""
    return token_for(make_user("user_admin", "admin@example.com", role=UserRole.ADMIN))


@pytest.fixture
def as_admin(client, admin_token):
    """Client authenticated as an admin."""
    client.cookies.set(AUTH_COOKIE, admin_token)
    return client
