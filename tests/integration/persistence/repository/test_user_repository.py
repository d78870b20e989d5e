"""Integration tests for PostgresUserRepository.

These tests need a migrated PostgreSQL database at DATABASE__URL and are
skipped when it is not set.
"""

import os
from uuid import uuid4

import pytest

from lending.domain.repository import UserRepository
from lending.domain.value import IdentityAssertion
from lending.domain.model.common import utc_now
from tests.factories import make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("DATABASE__URL"),
    reason="DATABASE__URL not set",
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def _unique(prefix: str) -> str:
    return f"{prefix}_{uuid4().hex[:12]}"


class TestUserRepositoryIntegration:
    """Integration tests for the atomic identity steps."""

    @pytest.mark.asyncio
    async def test_create_linked_identity_is_idempotent(self, integration_env):
        """A second create for the same subject should refresh, not duplicate."""
        # Arrange
        repo = await integration_env.get(UserRepository)
        subject = _unique("google")
        email = f"{_unique('a')}@example.com"
        assertion = IdentityAssertion(external_provider_id=subject, email=email)
        first = make_user(_unique("user"), email=email, external_provider_id=subject)
        second = make_user(_unique("user"), email=email, external_provider_id=subject)

        # Act
        created = await repo.create_linked_identity(first, assertion)
        again = await repo.create_linked_identity(second, assertion)

        # Assert
        assert again.user_id == created.user_id
        assert await repo.find_by_id(second.user_id, include_deleted=True) is None

    @pytest.mark.asyncio
    async def test_link_by_email_keeps_existing_subject(self, integration_env):
        """Linking by email should never replace a stored provider ID."""
        # Arrange
        repo = await integration_env.get(UserRepository)
        email = f"{_unique('b')}@example.com"
        existing = await repo.insert(
            make_user(_unique("user"), email=email, external_provider_id=_unique("old"))
        )
        assertion = IdentityAssertion(
            external_provider_id=_unique("new"), email=email, display_name="Bob"
        )

        # Act
        linked = await repo.link_identity_by_email(assertion, utc_now())

        # Assert
        assert linked is not None
        assert linked.user_id == existing.user_id
        assert linked.external_provider_id == existing.external_provider_id
        assert linked.name == "Bob"

    @pytest.mark.asyncio
    async def test_find_by_email_returns_oldest(self, integration_env):
        """Should return the earliest-created user sharing an email."""
        # Arrange
        repo = await integration_env.get(UserRepository)
        email = f"{_unique('c')}@example.com"
        older = await repo.insert(make_user(_unique("user"), email=email))
        await repo.insert(make_user(_unique("user"), email=email, created_offset=5))

        # Act
        found = await repo.find_by_email(email)

        # Assert
        assert found is not None
        assert found.user_id == older.user_id
