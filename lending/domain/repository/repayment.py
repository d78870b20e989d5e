"""Repayment and balance repository interfaces."""

from abc import ABC, abstractmethod
from typing import Optional

from lending.domain.model.repayment import Balance, Repayment
from lending.domain.value import ApplicationId, BalanceId, RepaymentId


class RepaymentRepository(ABC):
    """Repository interface for Repayment."""

    @abstractmethod
    async def next_id(self) -> RepaymentId:
        """Reserve the next repayment ID from the store's sequence."""
        pass

    @abstractmethod
    async def save(self, repayment: Repayment) -> Repayment:
        """Save a repayment (create or update)."""
        pass

    @abstractmethod
    async def find_by_id(self, repayment_id: RepaymentId) -> Optional[Repayment]:
        """Find an active repayment by ID."""
        pass

    @abstractmethod
    async def find_by_application(
        self, application_id: ApplicationId
    ) -> list[Repayment]:
        """List an application's active repayments, newest first."""
        pass


class BalanceRepository(ABC):
    """Repository interface for Balance."""

    @abstractmethod
    async def next_id(self) -> BalanceId:
        """Reserve the next balance ID from the store's sequence."""
        pass

    @abstractmethod
    async def save(self, balance: Balance) -> Balance:
        """Save a balance (create or update)."""
        pass

    @abstractmethod
    async def find_by_application(
        self, application_id: ApplicationId
    ) -> Optional[Balance]:
        """Find the active balance of an application, if any."""
        pass

    @abstractmethod
    async def adjust(
        self, application_id: ApplicationId, delta: int
    ) -> Optional[Balance]:
        """Atomically add ``delta`` to an application's balance.

        The change is refused when it would take the balance below zero.

        Args:
            application_id: Application whose balance changes
            delta: Amount to add; negative for a repayment

        Returns:
            The adjusted balance, or None if there is no active balance or
            it is too small
        """
        pass
