"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from lending.domain.service import JWTService
from lending.domain.value import UserRole
from lending.util.jwt import JWTError
from tests.factories import make_user


def test_token_round_trips_user_and_role(auth_settings):
    """Should embed the user's ID, email and role."""
    service = JWTService(auth_settings)
    user = make_user("user_1", role=UserRole.ADMIN)

    payload = service.verify_token(service.create_token(user))

    assert payload.user_id == "user_1"
    assert payload.email == "alice@example.com"
    assert payload.role == "admin"
    assert payload.exp > datetime.now(timezone.utc)


def test_token_from_other_secret_rejected(auth_settings):
    """Should raise JWTError for a token signed with another secret."""
    other_settings = auth_settings.model_copy(
        update={"jwt_secret": "other-secret-0123456789abcdef012345678"}
    )
    other = JWTService(other_settings)
    token = other.create_token(make_user())

    with pytest.raises(JWTError, match="Invalid token"):
        JWTService(auth_settings).verify_token(token)


def test_expired_token_rejected(auth_settings):
    """Should raise JWTError for an expired token."""
    token = jwt.encode(
        {
            "user_id": "user_1",
            "email": "alice@example.com",
            "role": "user",
            "iat": datetime.now(timezone.utc) - timedelta(days=2),
            "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
        },
        auth_settings.jwt_secret,
        algorithm=auth_settings.jwt_algorithm,
    )

    with pytest.raises(JWTError, match="expired"):
        JWTService(auth_settings).verify_token(token)


def test_garbage_token_rejected(auth_settings):
    """Should raise JWTError for a malformed token."""
    with pytest.raises(JWTError):
        JWTService(auth_settings).verify_token("not-a-token")


def test_token_without_role_rejected(auth_settings):
    """Should raise JWTError when a required claim is missing."""
    token = jwt.encode(
        {
            "user_id": "user_1",
            "email": "alice@example.com",
            "iat": datetime.now(timezone.utc),
            "exp": datetime.now(timezone.utc) + timedelta(minutes=5),
        },
        auth_settings.jwt_secret,
        algorithm=auth_settings.jwt_algorithm,
    )

    with pytest.raises(JWTError, match="Invalid"):
        JWTService(auth_settings).verify_token(token)
