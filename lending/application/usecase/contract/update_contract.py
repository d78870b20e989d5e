"""Update contract status use case."""

from datetime import datetime

from pydantic import BaseModel

from lending.domain.service import ContractService
from lending.domain.value import ContractId, ContractStatus

from .common import ContractResponse


class UpdateContractRequest(BaseModel):
    """Move a contract to a new status.

    ``signed_at`` and ``activated_at`` override the time stamped on
    signing and activation.
    """

    contract_id: int
    status: ContractStatus
    signed_at: datetime | None = None
    activated_at: datetime | None = None


class UpdateContractUseCase:
    """Use case for signing, activating, completing or cancelling a contract."""

    def __init__(self, contract_service: ContractService) -> None:
        self.contract_service = contract_service

    async def execute(self, request: UpdateContractRequest) -> ContractResponse:
        """Execute update contract flow.

        Raises:
            ValidationError: If the status move is not allowed
            NotFoundError: If the contract does not exist or was deleted
        """
        contract = await self.contract_service.update_status(
            ContractId(request.contract_id),
            request.status,
            signed_at=request.signed_at,
            activated_at=request.activated_at,
        )
        return ContractResponse.from_contract(contract)
