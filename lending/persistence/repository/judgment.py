"""PostgreSQL implementation of Judgment repository."""

from typing import Optional

from sqlalchemy import Select, select

from lending.domain.model import Judgment
from lending.domain.repository import JudgmentRepository
from lending.domain.value import ApplicationId, JudgmentId
from lending.persistence.mappers import judgment_to_dict, row_to_judgment
from lending.persistence.repository.base import PostgresRepository
from lending.persistence.tables import judgment_id_seq, judgments_table

judgments = judgments_table


def _select_active() -> Select:
    return select(judgments).where(judgments.c.is_deleted.is_(False))


class PostgresJudgmentRepository(PostgresRepository, JudgmentRepository):
    """PostgreSQL implementation of JudgmentRepository."""

    async def next_id(self) -> JudgmentId:
        """Reserve the next judgment ID from the sequence."""
        result = await self._execute(select(judgment_id_seq.next_value()))
        return JudgmentId(result.scalar_one())

    async def save(self, judgment: Judgment) -> Judgment:
        """Save or update a judgment."""
        await self._save_row(
            judgments, judgments.c.judgment_id, judgment_to_dict(judgment)
        )
        return judgment

    async def find_by_id(self, judgment_id: JudgmentId) -> Optional[Judgment]:
        """Find an active judgment by ID."""
        row = await self._first(
            _select_active().where(judgments.c.judgment_id == judgment_id)
        )
        return row_to_judgment(row) if row else None

    async def find_by_application(
        self, application_id: ApplicationId
    ) -> Optional[Judgment]:
        """Find the active judgment of an application."""
        row = await self._first(
            _select_active().where(judgments.c.application_id == application_id)
        )
        return row_to_judgment(row) if row else None

    async def find_all(self) -> list[Judgment]:
        """List active judgments, newest first."""
        stmt = _select_active().order_by(
            judgments.c.created_at.desc(), judgments.c.judgment_id.desc()
        )
        return [row_to_judgment(row) for row in await self._all(stmt)]
