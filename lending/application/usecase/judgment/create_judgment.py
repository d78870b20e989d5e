"""Create judgment use case."""

from pydantic import BaseModel

from lending.domain.service import JudgmentService
from lending.domain.value import ApplicationId

from .common import JudgmentResponse


class CreateJudgmentRequest(BaseModel):
    """Create judgment request."""

    application_id: int
    name: str = ""
    approval_amount: int
    approval_interest_rate: float
    reason: str | None = None


class CreateJudgmentUseCase:
    """Use case for judging a loan application."""

    def __init__(self, judgment_service: JudgmentService) -> None:
        """Initialize create judgment use case.

        Args:
            judgment_service: Judgment domain service
        """
        self.judgment_service = judgment_service

    async def execute(self, request: CreateJudgmentRequest) -> JudgmentResponse:
        """Execute create judgment flow.

        Raises:
            ValidationError: If the name is blank, an amount is negative or
                the application is already contracted
            NotFoundError: If the application does not exist
            ConflictError: If the application was already judged
        """
        judgment = await self.judgment_service.create(
            application_id=ApplicationId(request.application_id),
            name=request.name,
            approval_amount=request.approval_amount,
            approval_interest_rate=request.approval_interest_rate,
            reason=request.reason,
        )
        return JudgmentResponse.from_judgment(judgment)
