"""Get balance use case."""

from pydantic import BaseModel

from lending.domain.service import RepaymentService
from lending.domain.value import ApplicationId

from .common import BalanceResponse


class GetBalanceRequest(BaseModel):
    """Get balance request."""

    application_id: int


class GetBalanceUseCase:
    """Use case for reading a loan's outstanding balance."""

    def __init__(self, repayment_service: RepaymentService) -> None:
        self.repayment_service = repayment_service

    async def execute(self, request: GetBalanceRequest) -> BalanceResponse:
        """Execute get balance flow.

        Raises:
            NotFoundError: If the application does not exist or has not
                been disbursed
        """
        balance = await self.repayment_service.get_balance(
            ApplicationId(request.application_id)
        )
        return BalanceResponse.from_balance(balance)
