"""Create repayment use case."""

from pydantic import BaseModel

from lending.domain.service import RepaymentService
from lending.domain.value import ApplicationId

from .common import BalanceResponse, RepaymentResponse


class CreateRepaymentRequest(BaseModel):
    """Create repayment request."""

    application_id: int
    repayment_amount: int


class CreateRepaymentResponse(BaseModel):
    """The recorded repayment and the balance left after it."""

    repayment: RepaymentResponse
    balance: BalanceResponse


class CreateRepaymentUseCase:
    """Use case for recording a repayment."""

    def __init__(self, repayment_service: RepaymentService) -> None:
        """Initialize create repayment use case.

        Args:
            repayment_service: Repayment domain service
        """
        self.repayment_service = repayment_service

    async def execute(self, request: CreateRepaymentRequest) -> CreateRepaymentResponse:
        """Execute create repayment flow.

        Raises:
            ValidationError: If the amount is not positive, the application
                is not contracted, or the balance is missing or too small
            NotFoundError: If the application does not exist
        """
        application_id = ApplicationId(request.application_id)
        repayment = await self.repayment_service.repay(
            application_id, request.repayment_amount
        )
        balance = await self.repayment_service.get_balance(application_id)
        return CreateRepaymentResponse(
            repayment=RepaymentResponse.from_repayment(repayment),
            balance=BalanceResponse.from_balance(balance),
        )
