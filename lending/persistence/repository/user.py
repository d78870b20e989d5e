"""PostgreSQL implementation of User repository."""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from sqlalchemy import Select, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import IntegrityError

from lending.domain.error import ConflictError
from lending.domain.model import User
from lending.domain.repository import UserRepository
from lending.domain.value import IdentityAssertion, UserId
from lending.persistence.mappers import row_to_user, user_to_dict
from lending.persistence.repository.base import PostgresRepository
from lending.persistence.tables import users_table

PROVIDER_ID_CONSTRAINT = "uq_users_external_provider_id"


def _select_users(include_deleted: bool = False) -> Select:
    """Base query for users; hides soft-deleted rows unless asked not to."""
    stmt = select(users_table)
    if not include_deleted:
        stmt = stmt.where(users_table.c.is_deleted.is_(False))
    return stmt


def _refresh_values(
    assertion: IdentityAssertion, verified_at: datetime, include_email: bool
) -> dict[str, Any]:
    """Column values written by a sign-in; empty asserted values keep the stored ones."""
    values: dict[str, Any] = {
        "email_verified_at": verified_at,
        "updated_at": verified_at,
    }
    if assertion.display_name:
        values["name"] = assertion.display_name
    if assertion.avatar_url:
        values["avatar_url"] = assertion.avatar_url
    if include_email and assertion.email:
        values["email"] = assertion.email
    return values


class PostgresUserRepository(PostgresRepository, UserRepository):
    """PostgreSQL implementation of UserRepository."""

    async def find_by_id(
        self, user_id: UserId, include_deleted: bool = False
    ) -> Optional[User]:
        """Find a user by ID."""
        stmt = _select_users(include_deleted).where(users_table.c.user_id == user_id)
        row = await self._first(stmt)
        return row_to_user(row) if row else None

    async def find_by_email(
        self, email: str, include_deleted: bool = False
    ) -> Optional[User]:
        """Find the oldest user with the given email."""
        stmt = (
            _select_users(include_deleted)
            .where(users_table.c.email == email)
            .order_by(users_table.c.created_at)
            .limit(1)
        )
        row = await self._first(stmt)
        return row_to_user(row) if row else None

    async def find_by_external_provider_id(
        self, external_provider_id: str, include_deleted: bool = False
    ) -> Optional[User]:
        """Find a user by their linked identity provider subject."""
        stmt = _select_users(include_deleted).where(
            users_table.c.external_provider_id == external_provider_id
        )
        row = await self._first(stmt)
        return row_to_user(row) if row else None

    async def find_all(self, include_deleted: bool = False) -> list[User]:
        """List users, newest first."""
        stmt = _select_users(include_deleted).order_by(users_table.c.created_at.desc())
        return [row_to_user(row) for row in await self._all(stmt)]

    async def insert(self, user: User) -> User:
        """Insert a new user.

        User IDs are never reused, so a soft-deleted user with the same ID
        also makes the insert fail. A provider ID already linked to another
        user fails with its own message.
        """
        stmt = insert(users_table).values(**user_to_dict(user)).returning(users_table)
        try:
            row = await self._first(stmt)
        except IntegrityError as e:
            if PROVIDER_ID_CONSTRAINT in str(e.orig):
                raise ConflictError(
                    "Linked identity", str(user.external_provider_id)
                ) from e
            raise ConflictError("User", user.user_id) from e
        return row_to_user(row)

    async def update(self, user_id: UserId, fields: dict[str, Any]) -> Optional[User]:
        """Overwrite the given fields of an active user."""
        values = {
            key: value.value if isinstance(value, Enum) else value
            for key, value in fields.items()
        }
        stmt = (
            users_table.update()
            .where(users_table.c.user_id == user_id)
            .where(users_table.c.is_deleted.is_(False))
            .values(**values)
            .returning(users_table)
        )
        row = await self._first(stmt)
        return row_to_user(row) if row else None

    async def refresh_linked_identity(
        self, assertion: IdentityAssertion, verified_at: datetime
    ) -> Optional[User]:
        """Atomically refresh the user already linked to the asserted identity."""
        stmt = (
            users_table.update()
            .where(
                users_table.c.external_provider_id == assertion.external_provider_id
            )
            .values(**_refresh_values(assertion, verified_at, include_email=True))
            .returning(users_table)
        )
        row = await self._first(stmt)
        return row_to_user(row) if row else None

    async def link_identity_by_email(
        self, assertion: IdentityAssertion, verified_at: datetime
    ) -> Optional[User]:
        """Atomically attach the asserted identity to the oldest user with its email."""
        oldest_with_email = (
            select(users_table.c.user_id)
            .where(users_table.c.email == assertion.email)
            .order_by(users_table.c.created_at)
            .limit(1)
            .scalar_subquery()
        )
        stmt = (
            users_table.update()
            .where(users_table.c.user_id == oldest_with_email)
            .values(
                external_provider_id=func.coalesce(
                    users_table.c.external_provider_id,
                    assertion.external_provider_id,
                ),
                **_refresh_values(assertion, verified_at, include_email=False),
            )
            .returning(users_table)
        )
        try:
            async with self.session.begin_nested():
                row = await self._first(stmt)
        except IntegrityError:
            # A concurrent sign-in linked this provider ID to another user first
            return await self.refresh_linked_identity(assertion, verified_at)
        return row_to_user(row) if row else None

    async def create_linked_identity(
        self, user: User, assertion: IdentityAssertion
    ) -> User:
        """Insert a user keyed on its provider ID, or refresh the existing one."""
        stmt = insert(users_table).values(**user_to_dict(user))
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.external_provider_id],
            set_=_refresh_values(assertion, user.updated_at, include_email=True),
        ).returning(users_table)
        row = await self._first(stmt)
        return row_to_user(row)
