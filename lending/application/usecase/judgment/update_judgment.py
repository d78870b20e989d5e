"""Update judgment use case."""

from pydantic import BaseModel

from lending.domain.service import JudgmentService
from lending.domain.value import JudgmentId

from .common import JudgmentResponse


class UpdateJudgmentRequest(BaseModel):
    """Update judgment request.

    Omitted fields keep their values. An explicit None clears the reason.
    """

    judgment_id: int
    name: str | None = None
    approval_amount: int | None = None
    approval_interest_rate: float | None = None
    reason: str | None = None


class UpdateJudgmentUseCase:
    """Use case for revising a judgment."""

    def __init__(self, judgment_service: JudgmentService) -> None:
        self.judgment_service = judgment_service

    async def execute(self, request: UpdateJudgmentRequest) -> JudgmentResponse:
        """Execute update judgment flow.

        Raises:
            ValidationError: If a field is invalid or the application is
                already contracted
            NotFoundError: If the judgment does not exist or was deleted
        """
        changes = request.model_dump(exclude_unset=True, exclude={"judgment_id"})
        judgment = await self.judgment_service.update(
            JudgmentId(request.judgment_id), **changes
        )
        return JudgmentResponse.from_judgment(judgment)
