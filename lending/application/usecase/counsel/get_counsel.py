"""Get counsel use case."""

from pydantic import BaseModel

from lending.domain.service import CounselService
from lending.domain.value import CounselId

from .common import CounselResponse


class GetCounselRequest(BaseModel):
    """Get counsel request."""

    counsel_id: int


class GetCounselUseCase:
    """Use case for getting a consultation request by ID."""

    def __init__(self, counsel_service: CounselService) -> None:
        self.counsel_service = counsel_service

    async def execute(self, request: GetCounselRequest) -> CounselResponse:
        """Execute get counsel flow.

        Raises:
            NotFoundError: If it does not exist or was deleted
        """
        counsel = await self.counsel_service.get(CounselId(request.counsel_id))
        return CounselResponse.from_counsel(counsel)
