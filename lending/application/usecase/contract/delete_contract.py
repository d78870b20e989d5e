"""Delete contract use case."""

from pydantic import BaseModel

from lending.domain.service import ContractService
from lending.domain.value import ContractId


class DeleteContractRequest(BaseModel):
    """Delete contract request."""

    contract_id: int


class DeleteContractResponse(BaseModel):
    """Delete contract response."""

    contract_id: int
    deleted: bool


class DeleteContractUseCase:
    """Use case for soft-deleting a contract that never disbursed."""

    def __init__(self, contract_service: ContractService) -> None:
        self.contract_service = contract_service

    async def execute(self, request: DeleteContractRequest) -> DeleteContractResponse:
        """Execute delete contract flow.

        Raises:
            ValidationError: If the contract is active or completed
            NotFoundError: If it does not exist or was already deleted
        """
        await self.contract_service.delete(ContractId(request.contract_id))
        return DeleteContractResponse(contract_id=request.contract_id, deleted=True)
