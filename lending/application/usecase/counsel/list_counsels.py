"""List counsels use case."""

from pydantic import BaseModel

from lending.domain.service import CounselService

from .common import CounselResponse


class ListCounselsResponse(BaseModel):
    """List counsels response."""

    counsels: list[CounselResponse]


class ListCounselsUseCase:
    """Use case for listing consultation requests."""

    def __init__(self, counsel_service: CounselService) -> None:
        self.counsel_service = counsel_service

    async def execute(self) -> ListCounselsResponse:
        """Execute list counsels flow."""
        counsels = await self.counsel_service.list_counsels()
        return ListCounselsResponse(
            counsels=[CounselResponse.from_counsel(c) for c in counsels]
        )
