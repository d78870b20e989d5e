"""PostgreSQL implementation of LoanApplication repository."""

from typing import Optional

from sqlalchemy import select

from lending.domain.model import LoanApplication
from lending.domain.repository import LoanApplicationRepository
from lending.domain.value import ApplicationId
from lending.persistence.mappers import (
    loan_application_to_dict,
    row_to_loan_application,
)
from lending.persistence.repository.base import PostgresRepository
from lending.persistence.tables import application_id_seq, applications_table

applications = applications_table


class PostgresLoanApplicationRepository(PostgresRepository, LoanApplicationRepository):
    """PostgreSQL implementation of LoanApplicationRepository."""

    async def next_id(self) -> ApplicationId:
        """Reserve the next application ID from the sequence."""
        result = await self._execute(select(application_id_seq.next_value()))
        return ApplicationId(result.scalar_one())

    async def save(self, application: LoanApplication) -> LoanApplication:
        """Save or update an application."""
        await self._save_row(
            applications,
            applications.c.application_id,
            loan_application_to_dict(application),
        )
        return application

    async def find_by_id(
        self, application_id: ApplicationId
    ) -> Optional[LoanApplication]:
        """Find an active application by ID."""
        stmt = (
            select(applications)
            .where(applications.c.application_id == application_id)
            .where(applications.c.is_deleted.is_(False))
        )
        row = await self._first(stmt)
        return row_to_loan_application(row) if row else None

    async def find_all(self) -> list[LoanApplication]:
        """List active applications, most recent first."""
        stmt = (
            select(applications)
            .where(applications.c.is_deleted.is_(False))
            .order_by(
                applications.c.applied_at.desc(), applications.c.application_id.desc()
            )
        )
        return [row_to_loan_application(row) for row in await self._all(stmt)]
