"""PostgreSQL implementation of Counsel repository."""

from typing import Optional

from sqlalchemy import select

from lending.domain.model import Counsel
from lending.domain.repository import CounselRepository
from lending.domain.value import CounselId
from lending.persistence.mappers import counsel_to_dict, row_to_counsel
from lending.persistence.repository.base import PostgresRepository
from lending.persistence.tables import counsel_id_seq, counsels_table

counsels = counsels_table


class PostgresCounselRepository(PostgresRepository, CounselRepository):
    """PostgreSQL implementation of CounselRepository."""

    async def next_id(self) -> CounselId:
        """Reserve the next counsel ID from the sequence."""
        result = await self._execute(select(counsel_id_seq.next_value()))
        return CounselId(result.scalar_one())

    async def save(self, counsel: Counsel) -> Counsel:
        """Save or update a counsel request."""
        await self._save_row(counsels, counsels.c.counsel_id, counsel_to_dict(counsel))
        return counsel

    async def find_by_id(self, counsel_id: CounselId) -> Optional[Counsel]:
        """Find an active counsel request by ID."""
        stmt = (
            select(counsels)
            .where(counsels.c.counsel_id == counsel_id)
            .where(counsels.c.is_deleted.is_(False))
        )
        row = await self._first(stmt)
        return row_to_counsel(row) if row else None

    async def find_all(self) -> list[Counsel]:
        """List active counsel requests, most recent first."""
        stmt = (
            select(counsels)
            .where(counsels.c.is_deleted.is_(False))
            .order_by(counsels.c.applied_at.desc(), counsels.c.counsel_id.desc())
        )
        return [row_to_counsel(row) for row in await self._all(stmt)]
