"""Create contract use case."""

from pydantic import BaseModel

from lending.domain.service import ContractService
from lending.domain.value import ApplicationId, JudgmentId

from .common import ContractResponse


class CreateContractRequest(BaseModel):
    """Create contract request."""

    application_id: int
    judgment_id: int
    amount: int
    interest_rate: float
    term: int  # Months


class CreateContractUseCase:
    """Use case for drawing up a loan contract."""

    def __init__(self, contract_service: ContractService) -> None:
        """Initialize create contract use case.

        Args:
            contract_service: Contract domain service
        """
        self.contract_service = contract_service

    async def execute(self, request: CreateContractRequest) -> ContractResponse:
        """Execute create contract flow.

        Raises:
            ValidationError: If the figures or the judgment do not fit
            NotFoundError: If the application or judgment does not exist
            ConflictError: If the application already has a contract
        """
        contract = await self.contract_service.create(
            application_id=ApplicationId(request.application_id),
            judgment_id=JudgmentId(request.judgment_id),
            amount=request.amount,
            interest_rate=request.interest_rate,
            term=request.term,
        )
        return ContractResponse.from_contract(contract)
