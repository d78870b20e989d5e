"""Builders for domain objects used across tests."""

from datetime import datetime, timedelta, timezone

from lending.config import AuthSettings, Settings
from lending.domain.model import Terms, User
from lending.domain.value import TermsId, UserId
from lending.util.jwt import create_token

BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)


def make_user(
    user_id: str = "user_1",
    email: str = "alice@example.com",
    created_offset: int = 0,
    **overrides,
) -> User:
    """Build a user with deterministic timestamps.

    Args:
        user_id: User ID
        email: Email address
        created_offset: Minutes after the base time the user was created
        **overrides: Any other User field
    """
    created_at = BASE_TIME + timedelta(minutes=created_offset)
    fields = {
        "user_id": UserId(user_id),
        "name": "Alice",
        "email": email,
        "created_at": created_at,
        "updated_at": created_at,
    }
    fields.update(overrides)
    return User(**fields)


def make_terms(terms_id: int, name: str = "Service terms", **overrides) -> Terms:
    """Build terms with a deterministic ID."""
    fields = {
        "terms_id": TermsId(terms_id),
        "name": name,
        "terms_detail_url": f"https://example.com/terms/{terms_id}",
        "created_at": BASE_TIME,
        "updated_at": BASE_TIME,
    }
    fields.update(overrides)
    return Terms(**fields)


def token_for(user: User, settings: AuthSettings | None = None) -> str:
    """Issue a session token for a user, as sign-in would.

    Defaults to the settings the app container loads, so the token is
    accepted by the API under test.
    """
    return create_token(
        user.user_id, user.email, user.role.value, settings or Settings().auth
    )
