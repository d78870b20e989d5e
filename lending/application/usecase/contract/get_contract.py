"""Get contract use case."""

from pydantic import BaseModel

from lending.domain.service import ContractService
from lending.domain.value import ContractId

from .common import ContractResponse


class GetContractRequest(BaseModel):
    """Get contract request."""

    contract_id: int


class GetContractUseCase:
    """Use case for getting a contract by ID."""

    def __init__(self, contract_service: ContractService) -> None:
        self.contract_service = contract_service

    async def execute(self, request: GetContractRequest) -> ContractResponse:
        """Execute get contract flow.

        Raises:
            NotFoundError: If it does not exist or was deleted
        """
        contract = await self.contract_service.get(ContractId(request.contract_id))
        return ContractResponse.from_contract(contract)
