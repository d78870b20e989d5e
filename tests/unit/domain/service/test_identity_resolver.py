"""Unit tests for IdentityResolver."""

import pytest

from lending.domain.error import ValidationError
from lending.domain.service import IdentityResolver, UserService
from lending.domain.value import UserRole, UserStatus
from lending.persistence.repository.inmemory import InMemoryUserRepository
from tests.factories import make_user


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def resolver(user_repo) -> IdentityResolver:
    return IdentityResolver(user_repo)


class TestCreate:
    """New identities create a user."""

    @pytest.mark.asyncio
    async def test_unknown_identity_creates_user(self, resolver, user_repo):
        """Should create an active plain user linked to the provider ID."""
        user = await resolver.resolve_identity(
            "google|123", "alice@example.com", "Alice", "https://img/alice.png"
        )

        assert user.user_id.startswith("user_")
        assert user.external_provider_id == "google|123"
        assert user.email == "alice@example.com"
        assert user.name == "Alice"
        assert user.avatar_url == "https://img/alice.png"
        assert user.role == UserRole.USER
        assert user.status == UserStatus.ACTIVE
        assert user.is_deleted is False
        assert user.email_verified_at is not None
        assert await user_repo.find_by_id(user.user_id) == user

    @pytest.mark.asyncio
    async def test_name_falls_back_to_email(self, resolver):
        """Should use the email as name when no display name is asserted."""
        user = await resolver.resolve_identity("google|123", "alice@example.com")

        assert user.name == "alice@example.com"
        assert user.avatar_url is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "provider_id,email",
        [("", "alice@example.com"), ("   ", "alice@example.com"), ("google|1", "")],
    )
    async def test_blank_provider_id_or_email_rejected(
        self, resolver, user_repo, provider_id, email
    ):
        """Should raise ValidationError and write nothing."""
        with pytest.raises(ValidationError):
            await resolver.resolve_identity(provider_id, email)

        assert await user_repo.find_all(include_deleted=True) == []


class TestPrimaryLookup:
    """Identities already linked to a user refresh that user."""

    @pytest.mark.asyncio
    async def test_same_provider_id_updates_in_place(self, resolver, user_repo):
        """Should update the existing record rather than create a second one."""
        first = await resolver.resolve_identity(
            "google|123", "alice@example.com", "Alice"
        )
        second = await resolver.resolve_identity(
            "google|123", "alice@example.com", "Alice Smith"
        )

        assert second.user_id == first.user_id
        assert second.name == "Alice Smith"
        assert len(await user_repo.find_all()) == 1

    @pytest.mark.asyncio
    async def test_empty_values_keep_previous_ones(self, resolver):
        """Should not overwrite name or avatar with empty asserted values."""
        first = await resolver.resolve_identity(
            "google|123", "alice@example.com", "Alice", "https://img/alice.png"
        )
        second = await resolver.resolve_identity(
            "google|123", "alice@example.com", "", None
        )

        assert second.name == "Alice"
        assert second.avatar_url == "https://img/alice.png"
        assert second.email_verified_at >= first.email_verified_at

    @pytest.mark.asyncio
    async def test_linked_user_email_is_refreshed(self, resolver):
        """Should take over a changed email asserted by the provider."""
        first = await resolver.resolve_identity("google|123", "alice@example.com")
        second = await resolver.resolve_identity("google|123", "alice@new.example")

        assert second.user_id == first.user_id
        assert second.email == "alice@new.example"

    @pytest.mark.asyncio
    async def test_primary_lookup_wins_over_email(self, resolver, user_repo):
        """Should resolve by provider ID even when another user has the email."""
        await user_repo.insert(
            make_user("user_other", email="shared@example.com", created_offset=0)
        )
        await user_repo.insert(
            make_user(
                "user_linked",
                email="linked@example.com",
                created_offset=5,
                external_provider_id="google|123",
            )
        )

        user = await resolver.resolve_identity("google|123", "shared@example.com")

        assert user.user_id == "user_linked"
        other = await user_repo.find_by_id("user_other")
        assert other.external_provider_id is None


class TestSecondaryLookup:
    """Unlinked identities attach to an existing user by email."""

    @pytest.mark.asyncio
    async def test_existing_user_by_email_gets_provider_id(self, resolver, user_repo):
        """Should leave exactly one record that now carries the provider ID."""
        service = UserService(user_repo)
        await service.create("user_1", "Alice", "alice@example.com")

        user = await resolver.resolve_identity(
            "google|123", "alice@example.com", "Alice A."
        )

        assert user.user_id == "user_1"
        assert user.external_provider_id == "google|123"
        assert user.name == "Alice A."
        assert user.email_verified_at is not None
        assert len(await user_repo.find_all()) == 1

    @pytest.mark.asyncio
    async def test_oldest_email_match_wins(self, resolver, user_repo):
        """Should link the earliest-created user when several share the email."""
        await user_repo.insert(
            make_user("user_new", email="alice@example.com", created_offset=10)
        )
        await user_repo.insert(
            make_user("user_old", email="alice@example.com", created_offset=0)
        )

        user = await resolver.resolve_identity("google|123", "alice@example.com")

        assert user.user_id == "user_old"

    @pytest.mark.asyncio
    async def test_existing_link_is_not_reassigned(self, resolver, user_repo):
        """Should keep the provider ID already linked to the email-matched user."""
        await user_repo.insert(
            make_user(
                "user_1",
                email="alice@example.com",
                external_provider_id="github|999",
            )
        )

        user = await resolver.resolve_identity("google|123", "alice@example.com")

        assert user.user_id == "user_1"
        assert user.external_provider_id == "github|999"
        assert await user_repo.find_by_external_provider_id("google|123") is None

    @pytest.mark.asyncio
    async def test_email_lookup_is_exact(self, resolver, user_repo):
        """Should create a new user when only the email casing differs."""
        await user_repo.insert(make_user("user_1", email="alice@example.com"))

        user = await resolver.resolve_identity("google|123", "Alice@Example.com")

        assert user.user_id != "user_1"
        assert len(await user_repo.find_all()) == 2


class TestSoftDeletedUsers:
    """Soft-deleted users stay matchable by sign-in."""

    @pytest.mark.asyncio
    async def test_primary_lookup_matches_deleted_user(self, resolver, user_repo):
        """Should resolve to the soft-deleted user linked to the provider ID."""
        await user_repo.insert(
            make_user(
                "user_1",
                external_provider_id="google|123",
                is_deleted=True,
            )
        )

        user = await resolver.resolve_identity("google|123", "alice@example.com")

        assert user.user_id == "user_1"
        assert user.is_deleted is True
        assert len(await user_repo.find_all(include_deleted=True)) == 1

    @pytest.mark.asyncio
    async def test_email_lookup_matches_deleted_user(self, resolver, user_repo):
        """Should link the soft-deleted user found by email."""
        await user_repo.insert(make_user("user_1", is_deleted=True))

        user = await resolver.resolve_identity("google|123", "alice@example.com")

        assert user.user_id == "user_1"
        assert user.external_provider_id == "google|123"
