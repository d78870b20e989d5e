"""Delete judgment use case."""

from pydantic import BaseModel

from lending.domain.service import JudgmentService
from lending.domain.value import JudgmentId


class DeleteJudgmentRequest(BaseModel):
    """Delete judgment request."""

    judgment_id: int


class DeleteJudgmentResponse(BaseModel):
    """Delete judgment response."""

    judgment_id: int
    deleted: bool


class DeleteJudgmentUseCase:
    """Use case for withdrawing a judgment."""

    def __init__(self, judgment_service: JudgmentService) -> None:
        self.judgment_service = judgment_service

    async def execute(self, request: DeleteJudgmentRequest) -> DeleteJudgmentResponse:
        """Execute delete judgment flow.

        Raises:
            ValidationError: If the application is already contracted
            NotFoundError: If the judgment does not exist or was deleted
        """
        await self.judgment_service.delete(JudgmentId(request.judgment_id))
        return DeleteJudgmentResponse(judgment_id=request.judgment_id, deleted=True)
