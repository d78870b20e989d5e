"""In-memory implementation of Contract repository for testing."""

from copy import deepcopy
from typing import Optional

from lending.domain.model.contract import Contract
from lending.domain.repository.contract import ContractRepository
from lending.domain.value import ApplicationId, ContractId


class InMemoryContractRepository(ContractRepository):
    """In-memory implementation of ContractRepository for testing."""

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._contracts: dict[ContractId, Contract] = {}
        self._last_id = 0

    async def next_id(self) -> ContractId:
        """Reserve the next contract ID."""
        self._last_id += 1
        return ContractId(self._last_id)

    async def save(self, contract: Contract) -> Contract:
        """Save or update a contract."""
        self._contracts[contract.contract_id] = deepcopy(contract)
        return deepcopy(contract)

    async def find_by_id(self, contract_id: ContractId) -> Optional[Contract]:
        """Find an active contract by ID."""
        contract = self._contracts.get(contract_id)
        if contract and not contract.is_deleted:
            return deepcopy(contract)
        return None

    async def find_by_application(
        self, application_id: ApplicationId
    ) -> Optional[Contract]:
        """Find the active contract of an application."""
        for contract in await self.find_all():
            if contract.application_id == application_id:
                return contract
        return None

    async def find_all(self) -> list[Contract]:
        """List active contracts, newest first."""
        active = [c for c in self._contracts.values() if not c.is_deleted]
        active.sort(key=lambda c: (c.created_at, c.contract_id), reverse=True)
        return deepcopy(active)
