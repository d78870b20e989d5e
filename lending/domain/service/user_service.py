"""User domain service."""

from typing import Any

import logfire

from lending.domain.error import ConflictError, NotFoundError, ValidationError
from lending.domain.model import User
from lending.domain.model.common import utc_now
from lending.domain.repository import UserRepository
from lending.domain.value import UserId, UserRole, UserStatus

from .base import Service, check_changes

UPDATABLE_FIELDS = ("name", "email", "phone", "role", "status")

# Fields an update may set back to None
NULLABLE_FIELDS = {"phone"}


class UserService(Service):
    """Domain service for administrative user operations.

    All operations act on active (not soft-deleted) users.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def create(
        self,
        user_id: str,
        name: str,
        email: str,
        phone: str | None = None,
        role: UserRole = UserRole.USER,
        status: UserStatus = UserStatus.ACTIVE,
        external_provider_id: str | None = None,
    ) -> User:
        """Create a user.

        Args:
            user_id: Identifier chosen by the caller
            name: Display name
            email: Email address
            phone: Optional phone number
            role: Role, defaults to a plain user
            status: Status, defaults to active
            external_provider_id: Optional identity provider subject to link

        Returns:
            Created user

        Raises:
            ValidationError: If user ID, name or email is missing
            ConflictError: If an active user already has this ID, or the
                provider ID is linked to another user
        """
        missing = [
            field
            for field, value in (("user_id", user_id), ("name", name), ("email", email))
            if not value or not value.strip()
        ]
        if missing:
            raise ValidationError(
                f"User ID, name, and email are required (missing: {', '.join(missing)})"
            )

        with logfire.span("user_service.create", user_id=user_id):
            existing = await self.user_repository.find_by_id(UserId(user_id))
            if existing:
                logfire.warn("User already exists", user_id=user_id)
                raise ConflictError("User", user_id)

            now = utc_now()
            user = User(
                user_id=UserId(user_id),
                name=name,
                email=email,
                phone=phone,
                role=role,
                status=status,
                external_provider_id=external_provider_id,
                created_at=now,
                updated_at=now,
            )
            created = await self.user_repository.insert(user)
            logfire.info("User created", user_id=created.user_id)
            return created

    async def list_users(self, include_deleted: bool = False) -> list[User]:
        """List users, newest first.

        Args:
            include_deleted: Also return soft-deleted users (maintenance only)

        Returns:
            List of users
        """
        with logfire.span("user_service.list_users", include_deleted=include_deleted):
            users = await self.user_repository.find_all(include_deleted=include_deleted)
            logfire.info("Users listed", count=len(users))
            return users

    async def get_by_id(self, user_id: UserId) -> User | None:
        """Get an active user by ID.

        Args:
            user_id: User ID

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=user_id)
            return user

    async def update(self, user_id: UserId, **changes: Any) -> User:
        """Update the given fields of an active user.

        Only the fields passed are touched. ``phone`` may be passed as None
        to clear it; the other fields cannot be cleared.

        Args:
            user_id: User ID
            **changes: Any of name, email, phone, role, status

        Returns:
            Updated user

        Raises:
            ValidationError: If a field is unknown, or is blank or None
                where a value is required
            NotFoundError: If no active user has this ID
        """
        check_changes(
            "User",
            changes,
            UPDATABLE_FIELDS,
            nullable=NULLABLE_FIELDS,
            required_text=("name", "email"),
        )

        with logfire.span(
            "user_service.update", user_id=user_id, fields=sorted(changes)
        ):
            fields: dict[str, Any] = {**changes, "updated_at": utc_now()}
            updated = await self.user_repository.update(user_id, fields)
            if not updated:
                logfire.warn("User not found", user_id=user_id)
                raise NotFoundError("User", user_id)
            logfire.info("User updated", user_id=user_id)
            return updated

    async def soft_delete(self, user_id: UserId) -> None:
        """Soft-delete an active user.

        The record stays in the store and is hidden from normal lookups.

        Args:
            user_id: User ID

        Raises:
            NotFoundError: If no active user has this ID
        """
        with logfire.span("user_service.soft_delete", user_id=user_id):
            deleted = await self.user_repository.update(
                user_id, {"is_deleted": True, "updated_at": utc_now()}
            )
            if not deleted:
                logfire.warn("User not found", user_id=user_id)
                raise NotFoundError("User", user_id)
            logfire.info("User soft-deleted", user_id=user_id)
