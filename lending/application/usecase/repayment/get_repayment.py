"""Get repayment use case."""

from pydantic import BaseModel

from lending.domain.service import RepaymentService
from lending.domain.value import RepaymentId

from .common import RepaymentResponse


class GetRepaymentRequest(BaseModel):
    """Get repayment request."""

    repayment_id: int


class GetRepaymentUseCase:
    """Use case for getting a repayment by ID."""

    def __init__(self, repayment_service: RepaymentService) -> None:
        self.repayment_service = repayment_service

    async def execute(self, request: GetRepaymentRequest) -> RepaymentResponse:
        """Execute get repayment flow.

        Raises:
            NotFoundError: If it does not exist or was deleted
        """
        repayment = await self.repayment_service.get(RepaymentId(request.repayment_id))
        return RepaymentResponse.from_repayment(repayment)
