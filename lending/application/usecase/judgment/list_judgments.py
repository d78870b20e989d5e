"""List judgments use case."""

from pydantic import BaseModel

from lending.domain.service import JudgmentService

from .common import JudgmentResponse


class ListJudgmentsResponse(BaseModel):
    """List judgments response."""

    judgments: list[JudgmentResponse]


class ListJudgmentsUseCase:
    """Use case for listing judgments."""

    def __init__(self, judgment_service: JudgmentService) -> None:
        self.judgment_service = judgment_service

    async def execute(self) -> ListJudgmentsResponse:
        """Execute list judgments flow."""
        judgments = await self.judgment_service.list_judgments()
        return ListJudgmentsResponse(
            judgments=[JudgmentResponse.from_judgment(j) for j in judgments]
        )
