"""List repayments use case."""

from pydantic import BaseModel

from lending.domain.service import RepaymentService
from lending.domain.value import ApplicationId

from .common import RepaymentResponse


class ListRepaymentsRequest(BaseModel):
    """List repayments request."""

    application_id: int


class ListRepaymentsResponse(BaseModel):
    """List repayments response."""

    repayments: list[RepaymentResponse]


class ListRepaymentsUseCase:
    """Use case for listing an application's repayments."""

    def __init__(self, repayment_service: RepaymentService) -> None:
        self.repayment_service = repayment_service

    async def execute(self, request: ListRepaymentsRequest) -> ListRepaymentsResponse:
        """Execute list repayments flow.

        Raises:
            NotFoundError: If the application does not exist
        """
        repayments = await self.repayment_service.list_for_application(
            ApplicationId(request.application_id)
        )
        return ListRepaymentsResponse(
            repayments=[RepaymentResponse.from_repayment(r) for r in repayments]
        )
