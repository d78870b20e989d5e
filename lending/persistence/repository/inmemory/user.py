"""In-memory user repository for testing."""

from datetime import datetime
from typing import Any, Optional

from lending.domain.error import ConflictError
from lending.domain.model.user import User
from lending.domain.repository.user import UserRepository
from lending.domain.value import IdentityAssertion, UserId


def _refreshed(
    user: User,
    assertion: IdentityAssertion,
    verified_at: datetime,
    include_email: bool,
) -> User:
    update: dict[str, Any] = {
        "email_verified_at": verified_at,
        "updated_at": verified_at,
    }
    if assertion.display_name:
        update["name"] = assertion.display_name
    if assertion.avatar_url:
        update["avatar_url"] = assertion.avatar_url
    if include_email and assertion.email:
        update["email"] = assertion.email
    return user.model_copy(update=update)


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    def _visible(self, include_deleted: bool) -> list[User]:
        return [
            user
            for user in self._users.values()
            if include_deleted or not user.is_deleted
        ]

    async def find_by_id(
        self, user_id: UserId, include_deleted: bool = False
    ) -> Optional[User]:
        """Find a user by ID."""
        user = self._users.get(user_id)
        if user and (include_deleted or not user.is_deleted):
            return user
        return None

    async def find_by_email(
        self, email: str, include_deleted: bool = False
    ) -> Optional[User]:
        """Find the oldest user with the given email."""
        matches = [u for u in self._visible(include_deleted) if u.email == email]
        return min(matches, key=lambda u: u.created_at) if matches else None

    async def find_by_external_provider_id(
        self, external_provider_id: str, include_deleted: bool = False
    ) -> Optional[User]:
        """Find a user by their linked identity provider subject."""
        for user in self._visible(include_deleted):
            if user.external_provider_id == external_provider_id:
                return user
        return None

    async def find_all(self, include_deleted: bool = False) -> list[User]:
        """List users, newest first."""
        return sorted(
            self._visible(include_deleted), key=lambda u: u.created_at, reverse=True
        )

    async def insert(self, user: User) -> User:
        """Insert a new user."""
        if user.user_id in self._users:
            raise ConflictError("User", user.user_id)
        if user.external_provider_id and await self.find_by_external_provider_id(
            user.external_provider_id, include_deleted=True
        ):
            raise ConflictError("Linked identity", user.external_provider_id)
        self._users[user.user_id] = user
        return user

    async def update(self, user_id: UserId, fields: dict[str, Any]) -> Optional[User]:
        """Overwrite the given fields of an active user."""
        user = await self.find_by_id(user_id)
        if not user:
            return None
        updated = user.model_copy(update=fields)
        self._users[user_id] = updated
        return updated

    async def refresh_linked_identity(
        self, assertion: IdentityAssertion, verified_at: datetime
    ) -> Optional[User]:
        """Refresh the user already linked to the asserted identity."""
        user = await self.find_by_external_provider_id(
            assertion.external_provider_id, include_deleted=True
        )
        if not user:
            return None
        updated = _refreshed(user, assertion, verified_at, include_email=True)
        self._users[user.user_id] = updated
        return updated

    async def link_identity_by_email(
        self, assertion: IdentityAssertion, verified_at: datetime
    ) -> Optional[User]:
        """Attach the asserted identity to the oldest user with its email."""
        user = await self.find_by_email(assertion.email, include_deleted=True)
        if not user:
            return None
        updated = _refreshed(user, assertion, verified_at, include_email=False)
        if not updated.external_provider_id:
            updated = updated.model_copy(
                update={"external_provider_id": assertion.external_provider_id}
            )
        self._users[user.user_id] = updated
        return updated

    async def create_linked_identity(
        self, user: User, assertion: IdentityAssertion
    ) -> User:
        """Insert a user keyed on its provider ID, or refresh the existing one."""
        existing = await self.refresh_linked_identity(assertion, user.updated_at)
        if existing:
            return existing
        self._users[user.user_id] = user
        return user
