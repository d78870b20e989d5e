"""User repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Optional

from lending.domain.model.user import User
from lending.domain.value import IdentityAssertion, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.

    Every lookup hides soft-deleted users unless ``include_deleted`` is set.
    The override exists for maintenance paths and identity resolution only.

    Raises:
        TransientStoreError: From any method, when the store is unreachable
    """

    @abstractmethod
    async def find_by_id(
        self, user_id: UserId, include_deleted: bool = False
    ) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier
            include_deleted: Also match soft-deleted users

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(
        self, email: str, include_deleted: bool = False
    ) -> Optional[User]:
        """Find the oldest user with the given email.

        Args:
            email: The user's email address
            include_deleted: Also match soft-deleted users

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_external_provider_id(
        self, external_provider_id: str, include_deleted: bool = False
    ) -> Optional[User]:
        """Find a user by their linked identity provider subject.

        Args:
            external_provider_id: Subject ID from the identity provider
            include_deleted: Also match soft-deleted users

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, include_deleted: bool = False) -> list[User]:
        """List users, newest first.

        Args:
            include_deleted: Also return soft-deleted users

        Returns:
            Users ordered by creation time, descending
        """
        pass

    @abstractmethod
    async def insert(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: The user to insert

        Returns:
            The stored user, with store-maintained fields filled in

        Raises:
            ConflictError: If the user ID is already taken
        """
        pass

    @abstractmethod
    async def update(self, user_id: UserId, fields: dict[str, Any]) -> Optional[User]:
        """Overwrite the given fields of an active user.

        Args:
            user_id: The user's unique identifier
            fields: Column values to set; other columns keep their values

        Returns:
            The updated user, or None if no active user matched
        """
        pass

    @abstractmethod
    async def refresh_linked_identity(
        self, assertion: IdentityAssertion, verified_at: datetime
    ) -> Optional[User]:
        """Atomically refresh the user already linked to the asserted identity.

        Overwrites name, avatar URL and email with the asserted values when
        they are non-empty, and stamps ``email_verified_at``. Soft-deleted
        users are matched too.

        Args:
            assertion: Identity attributes from the provider
            verified_at: Sign-in time

        Returns:
            The refreshed user, or None if no user carries the provider ID
        """
        pass

    @abstractmethod
    async def link_identity_by_email(
        self, assertion: IdentityAssertion, verified_at: datetime
    ) -> Optional[User]:
        """Atomically attach the asserted identity to the oldest user with its email.

        The provider ID is only written when the matched user has none; an
        existing link is never reassigned. Name and avatar URL are
        overwritten when non-empty and ``email_verified_at`` is stamped.
        Soft-deleted users are matched too.

        Args:
            assertion: Identity attributes from the provider
            verified_at: Sign-in time

        Returns:
            The matched user, or None if no user has the email
        """
        pass

    @abstractmethod
    async def create_linked_identity(
        self, user: User, assertion: IdentityAssertion
    ) -> User:
        """Insert a user keyed on its provider ID, or refresh the existing one.

        Acts as an atomic find-or-create on the unique provider ID: when a
        concurrent sign-in created the record first, that record is
        refreshed from ``assertion`` like ``refresh_linked_identity`` and
        returned instead.

        Args:
            user: The new user, with ``external_provider_id`` set
            assertion: Identity attributes the user was built from

        Returns:
            The stored user
        """
        pass
