"""Loan application repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from lending.domain.model.loan_application import LoanApplication
from lending.domain.value import ApplicationId


class LoanApplicationRepository(ABC):
    """Repository interface for LoanApplication."""

    @abstractmethod
    async def next_id(self) -> ApplicationId:
        """Reserve the next application ID from the store's sequence."""
        pass

    @abstractmethod
    async def save(self, application: LoanApplication) -> LoanApplication:
        """Save an application (create or update).

        Args:
            application: Application to save

        Returns:
            Saved application
        """
        pass

    @abstractmethod
    async def find_by_id(
        self, application_id: ApplicationId
    ) -> Optional[LoanApplication]:
        """Find an active application by ID.

        Args:
            application_id: Application identifier

        Returns:
            Application if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[LoanApplication]:
        """List active applications, most recent ``applied_at`` first."""
        pass
