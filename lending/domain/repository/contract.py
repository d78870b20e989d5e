"""Contract repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from lending.domain.model.contract import Contract
from lending.domain.value import ApplicationId, ContractId


class ContractRepository(ABC):
    """Repository interface for Contract."""

    @abstractmethod
    async def next_id(self) -> ContractId:
        """Reserve the next contract ID from the store's sequence."""
        pass

    @abstractmethod
    async def save(self, contract: Contract) -> Contract:
        """Save a contract (create or update)."""
        pass

    @abstractmethod
    async def find_by_id(self, contract_id: ContractId) -> Optional[Contract]:
        """Find an active contract by ID."""
        pass

    @abstractmethod
    async def find_by_application(
        self, application_id: ApplicationId
    ) -> Optional[Contract]:
        """Find the active contract of an application, if any."""
        pass

    @abstractmethod
    async def find_all(self) -> list[Contract]:
        """List active contracts, newest first."""
        pass
