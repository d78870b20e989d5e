"""PostgreSQL implementations of Repayment and Balance repositories."""

from typing import Optional

from sqlalchemy import select, update

from lending.domain.model import Balance, Repayment
from lending.domain.model.common import utc_now
from lending.domain.repository import BalanceRepository, RepaymentRepository
from lending.domain.value import ApplicationId, BalanceId, RepaymentId
from lending.persistence.mappers import (
    balance_to_dict,
    repayment_to_dict,
    row_to_balance,
    row_to_repayment,
)
from lending.persistence.repository.base import PostgresRepository
from lending.persistence.tables import (
    balance_id_seq,
    balances_table,
    repayment_id_seq,
    repayments_table,
)

repayments = repayments_table
balances = balances_table


class PostgresRepaymentRepository(PostgresRepository, RepaymentRepository):
    """PostgreSQL implementation of RepaymentRepository."""

    async def next_id(self) -> RepaymentId:
        """Reserve the next repayment ID from the sequence."""
        result = await self._execute(select(repayment_id_seq.next_value()))
        return RepaymentId(result.scalar_one())

    async def save(self, repayment: Repayment) -> Repayment:
        """Save or update a repayment."""
        await self._save_row(
            repayments, repayments.c.repayment_id, repayment_to_dict(repayment)
        )
        return repayment

    async def find_by_id(self, repayment_id: RepaymentId) -> Optional[Repayment]:
        """Find an active repayment by ID."""
        stmt = (
            select(repayments)
            .where(repayments.c.repayment_id == repayment_id)
            .where(repayments.c.is_deleted.is_(False))
        )
        row = await self._first(stmt)
        return row_to_repayment(row) if row else None

    async def find_by_application(
        self, application_id: ApplicationId
    ) -> list[Repayment]:
        """List an application's active repayments, newest first."""
        stmt = (
            select(repayments)
            .where(repayments.c.application_id == application_id)
            .where(repayments.c.is_deleted.is_(False))
            .order_by(repayments.c.created_at.desc(), repayments.c.repayment_id.desc())
        )
        return [row_to_repayment(row) for row in await self._all(stmt)]


class PostgresBalanceRepository(PostgresRepository, BalanceRepository):
    """PostgreSQL implementation of BalanceRepository."""

    async def next_id(self) -> BalanceId:
        """Reserve the next balance ID from the sequence."""
        result = await self._execute(select(balance_id_seq.next_value()))
        return BalanceId(result.scalar_one())

    async def save(self, balance: Balance) -> Balance:
        """Save or update a balance."""
        await self._save_row(balances, balances.c.balance_id, balance_to_dict(balance))
        return balance

    async def find_by_application(
        self, application_id: ApplicationId
    ) -> Optional[Balance]:
        """Find the active balance of an application."""
        stmt = (
            select(balances)
            .where(balances.c.application_id == application_id)
            .where(balances.c.is_deleted.is_(False))
        )
        row = await self._first(stmt)
        return row_to_balance(row) if row else None

    async def adjust(
        self, application_id: ApplicationId, delta: int
    ) -> Optional[Balance]:
        """Apply ``delta`` in one conditional UPDATE.

        The guard in the WHERE clause makes concurrent repayments serialize
        on the row, so none can overdraw the balance.
        """
        stmt = (
            update(balances)
            .where(balances.c.application_id == application_id)
            .where(balances.c.is_deleted.is_(False))
            .where(balances.c.balance + delta >= 0)
            .values(balance=balances.c.balance + delta, updated_at=utc_now())
            .returning(balances)
        )
        row = await self._first(stmt)
        return row_to_balance(row) if row else None
