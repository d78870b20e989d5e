"""In-memory implementations of Repayment and Balance repositories for testing."""

from copy import deepcopy
from typing import Optional

from lending.domain.model.common import utc_now
from lending.domain.model.repayment import Balance, Repayment
from lending.domain.repository.repayment import BalanceRepository, RepaymentRepository
from lending.domain.value import ApplicationId, BalanceId, RepaymentId


class InMemoryRepaymentRepository(RepaymentRepository):
    """In-memory implementation of RepaymentRepository for testing."""

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._repayments: dict[RepaymentId, Repayment] = {}
        self._last_id = 0

    async def next_id(self) -> RepaymentId:
        """Reserve the next repayment ID."""
        self._last_id += 1
        return RepaymentId(self._last_id)

    async def save(self, repayment: Repayment) -> Repayment:
        """Save or update a repayment."""
        self._repayments[repayment.repayment_id] = deepcopy(repayment)
        return deepcopy(repayment)

    async def find_by_id(self, repayment_id: RepaymentId) -> Optional[Repayment]:
        """Find an active repayment by ID."""
        repayment = self._repayments.get(repayment_id)
        if repayment and not repayment.is_deleted:
            return deepcopy(repayment)
        return None

    async def find_by_application(
        self, application_id: ApplicationId
    ) -> list[Repayment]:
        """List an application's active repayments, newest first."""
        found = [
            r
            for r in self._repayments.values()
            if r.application_id == application_id and not r.is_deleted
        ]
        found.sort(key=lambda r: (r.created_at, r.repayment_id), reverse=True)
        return deepcopy(found)


class InMemoryBalanceRepository(BalanceRepository):
    """In-memory implementation of BalanceRepository for testing."""

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._balances: dict[BalanceId, Balance] = {}
        self._last_id = 0

    async def next_id(self) -> BalanceId:
        """Reserve the next balance ID."""
        self._last_id += 1
        return BalanceId(self._last_id)

    async def save(self, balance: Balance) -> Balance:
        """Save or update a balance."""
        self._balances[balance.balance_id] = deepcopy(balance)
        return deepcopy(balance)

    async def find_by_application(
        self, application_id: ApplicationId
    ) -> Optional[Balance]:
        """Find the active balance of an application."""
        for balance in self._balances.values():
            if balance.application_id == application_id and not balance.is_deleted:
                return deepcopy(balance)
        return None

    async def adjust(
        self, application_id: ApplicationId, delta: int
    ) -> Optional[Balance]:
        """Apply ``delta`` unless it would take the balance below zero."""
        balance = await self.find_by_application(application_id)
        if not balance or balance.balance + delta < 0:
            return None
        return await self.save(
            balance.model_copy(
                update={"balance": balance.balance + delta, "updated_at": utc_now()}
            )
        )
