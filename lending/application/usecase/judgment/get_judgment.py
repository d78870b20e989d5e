"""Get judgment use case."""

from pydantic import BaseModel

from lending.domain.error import ValidationError
from lending.domain.service import JudgmentService
from lending.domain.value import ApplicationId, JudgmentId

from .common import JudgmentResponse


class GetJudgmentRequest(BaseModel):
    """Get judgment request.

    Looks up by judgment ID, or by application ID when that is given
    instead.
    """

    judgment_id: int | None = None
    application_id: int | None = None


class GetJudgmentUseCase:
    """Use case for getting a judgment by its ID or its application."""

    def __init__(self, judgment_service: JudgmentService) -> None:
        self.judgment_service = judgment_service

    async def execute(self, request: GetJudgmentRequest) -> JudgmentResponse:
        """Execute get judgment flow.

        Raises:
            ValidationError: If neither ID is given
            NotFoundError: If no active judgment matches
        """
        if request.judgment_id is not None:
            judgment = await self.judgment_service.get(JudgmentId(request.judgment_id))
        elif request.application_id is not None:
            judgment = await self.judgment_service.get_for_application(
                ApplicationId(request.application_id)
            )
        else:
            raise ValidationError("A judgment ID or application ID is required")
        return JudgmentResponse.from_judgment(judgment)
