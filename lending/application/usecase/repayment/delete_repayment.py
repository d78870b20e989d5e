"""Delete repayment use case."""

from pydantic import BaseModel

from lending.domain.service import RepaymentService
from lending.domain.value import RepaymentId


class DeleteRepaymentRequest(BaseModel):
    """Delete repayment request."""

    repayment_id: int


class DeleteRepaymentResponse(BaseModel):
    """Delete repayment response."""

    repayment_id: int
    deleted: bool


class DeleteRepaymentUseCase:
    """Use case for reversing a repayment entered in error."""

    def __init__(self, repayment_service: RepaymentService) -> None:
        self.repayment_service = repayment_service

    async def execute(self, request: DeleteRepaymentRequest) -> DeleteRepaymentResponse:
        """Execute delete repayment flow.

        Raises:
            NotFoundError: If the repayment or its balance does not exist
        """
        await self.repayment_service.delete(RepaymentId(request.repayment_id))
        return DeleteRepaymentResponse(repayment_id=request.repayment_id, deleted=True)
