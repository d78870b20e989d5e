"""Delete counsel use case."""

from pydantic import BaseModel

from lending.domain.service import CounselService
from lending.domain.value import CounselId


class DeleteCounselRequest(BaseModel):
    """Delete counsel request."""

    counsel_id: int


class DeleteCounselResponse(BaseModel):
    """Delete counsel response."""

    counsel_id: int
    deleted: bool


class DeleteCounselUseCase:
    """Use case for soft-deleting a consultation request."""

    def __init__(self, counsel_service: CounselService) -> None:
        self.counsel_service = counsel_service

    async def execute(self, request: DeleteCounselRequest) -> DeleteCounselResponse:
        """Execute delete counsel flow.

        Raises:
            NotFoundError: If it does not exist or was already deleted
        """
        await self.counsel_service.delete(CounselId(request.counsel_id))
        return DeleteCounselResponse(counsel_id=request.counsel_id, deleted=True)
