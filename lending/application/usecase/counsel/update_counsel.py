"""Update counsel use case."""

from pydantic import BaseModel

from lending.domain.service import CounselService
from lending.domain.value import CounselId

from .common import CounselResponse


class UpdateCounselRequest(BaseModel):
    """Update counsel request.

    Omitted fields keep their values. An explicit None clears the memo or
    an address field.
    """

    counsel_id: int
    name: str | None = None
    cell_phone: str | None = None
    email: str | None = None
    memo: str | None = None
    address: str | None = None
    address_detail: str | None = None
    zip_code: str | None = None


class UpdateCounselUseCase:
    """Use case for partially updating a consultation request."""

    def __init__(self, counsel_service: CounselService) -> None:
        self.counsel_service = counsel_service

    async def execute(self, request: UpdateCounselRequest) -> CounselResponse:
        """Execute update counsel flow.

        Raises:
            ValidationError: If a contact field is blank or null
            NotFoundError: If it does not exist or was deleted
        """
        changes = request.model_dump(exclude_unset=True, exclude={"counsel_id"})
        counsel = await self.counsel_service.update(
            CounselId(request.counsel_id), **changes
        )
        return CounselResponse.from_counsel(counsel)
