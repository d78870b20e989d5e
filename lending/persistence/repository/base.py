"""Shared plumbing for PostgreSQL repositories."""

from typing import Any

from sqlalchemy import Column, Table, exc, insert, select, update
from sqlalchemy.engine import Result
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from lending.domain.error import TransientStoreError

# Connectivity failures: the driver could not reach the database or gave up waiting
TRANSIENT_ERRORS = (
    exc.OperationalError,
    exc.InterfaceError,
    exc.TimeoutError,
    OSError,
)


class PostgresRepository:
    """Base for repositories sharing one request-scoped session."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _execute(self, stmt: Executable) -> Result[Any]:
        """Execute a statement and flush, surfacing outages as TransientStoreError."""
        try:
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result
        except TRANSIENT_ERRORS as e:
            raise TransientStoreError(f"Database unavailable: {e}") from e

    async def _first(self, stmt: Executable) -> dict[str, Any] | None:
        """Execute a statement and return the first row as a dict."""
        result = await self._execute(stmt)
        row = result.mappings().first()
        return dict(row) if row else None

    async def _all(self, stmt: Executable) -> list[dict[str, Any]]:
        """Execute a statement and return every row as a dict."""
        result = await self._execute(stmt)
        return [dict(row) for row in result.mappings().all()]

    async def _save_row(self, table: Table, key: Column, values: dict[str, Any]) -> None:
        """Update the row whose ``key`` matches, or insert a new one.

        Soft-deleted rows count as existing, so saving a deleted entity
        updates it in place.
        """
        key_value = values[key.name]
        existing = await self._first(select(key).where(key == key_value))
        if existing:
            stmt = update(table).where(key == key_value).values(**values)
        else:
            stmt = insert(table).values(**values)
        await self._execute(stmt)
