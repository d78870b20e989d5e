"""Create counsel use case."""

from datetime import datetime

from pydantic import BaseModel

from lending.domain.service import CounselService

from .common import CounselResponse


class CreateCounselRequest(BaseModel):
    """Consultation request from the public intake form.

    ``message`` is the form's free-text box and is stored as the memo when
    no memo is given.
    """

    name: str = ""
    cell_phone: str = ""
    email: str = ""
    memo: str | None = None
    message: str | None = None
    address: str | None = None
    address_detail: str | None = None
    zip_code: str | None = None
    counsel_date_time: datetime | None = None


class CreateCounselUseCase:
    """Use case for recording a consultation request."""

    def __init__(self, counsel_service: CounselService) -> None:
        """Initialize create counsel use case.

        Args:
            counsel_service: Counsel domain service
        """
        self.counsel_service = counsel_service

    async def execute(self, request: CreateCounselRequest) -> CounselResponse:
        """Execute create counsel flow.

        Raises:
            ValidationError: If name, cell phone or email is missing
        """
        counsel = await self.counsel_service.create(
            name=request.name,
            cell_phone=request.cell_phone,
            email=request.email,
            memo=request.memo or request.message,
            address=request.address,
            address_detail=request.address_detail,
            zip_code=request.zip_code,
            applied_at=request.counsel_date_time,
        )
        return CounselResponse.from_counsel(counsel)
