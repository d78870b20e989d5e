"""PostgreSQL implementation of Terms repository."""

from typing import Optional

from sqlalchemy import Select, select

from lending.domain.model import Terms
from lending.domain.repository import TermsRepository
from lending.domain.value import TermsId
from lending.persistence.mappers import row_to_terms, terms_to_dict
from lending.persistence.repository.base import PostgresRepository
from lending.persistence.tables import terms_id_seq, terms_table


def _select_terms(include_deleted: bool = False) -> Select:
    stmt = select(terms_table)
    if not include_deleted:
        stmt = stmt.where(terms_table.c.is_deleted.is_(False))
    return stmt


class PostgresTermsRepository(PostgresRepository, TermsRepository):
    """PostgreSQL implementation of TermsRepository."""

    async def next_id(self) -> TermsId:
        """Reserve the next terms ID from the sequence."""
        result = await self._execute(select(terms_id_seq.next_value()))
        return TermsId(result.scalar_one())

    async def save(self, terms: Terms) -> Terms:
        """Save or update terms."""
        await self._save_row(terms_table, terms_table.c.terms_id, terms_to_dict(terms))
        return terms

    async def find_by_id(
        self, terms_id: TermsId, include_deleted: bool = False
    ) -> Optional[Terms]:
        """Find terms by ID."""
        stmt = _select_terms(include_deleted).where(terms_table.c.terms_id == terms_id)
        row = await self._first(stmt)
        return row_to_terms(row) if row else None

    async def find_by_ids(
        self, terms_ids: list[TermsId], include_deleted: bool = False
    ) -> list[Terms]:
        """Find multiple terms by ID in a single query."""
        if not terms_ids:
            return []

        stmt = (
            _select_terms(include_deleted)
            .where(terms_table.c.terms_id.in_(terms_ids))
            .order_by(terms_table.c.terms_id)
        )
        return [row_to_terms(row) for row in await self._all(stmt)]

    async def find_all(self, include_deleted: bool = False) -> list[Terms]:
        """List terms ordered by ID."""
        stmt = _select_terms(include_deleted).order_by(terms_table.c.terms_id)
        return [row_to_terms(row) for row in await self._all(stmt)]
