"""Update loan application use case."""

from datetime import datetime

from pydantic import BaseModel

from lending.domain.service import ApplicationService
from lending.domain.value import ApplicationId

from .common import ApplicationResponse


class UpdateApplicationRequest(BaseModel):
    """Update application request.

    Omitted fields keep their values. An explicit None clears one of the
    optional loan terms.
    """

    application_id: int
    name: str | None = None
    cell_phone: str | None = None
    email: str | None = None
    interest_rate: float | None = None
    fee: int | None = None
    maturity: datetime | None = None
    hope_amount: int | None = None


class UpdateApplicationUseCase:
    """Use case for correcting the applicant-supplied fields."""

    def __init__(self, application_service: ApplicationService) -> None:
        self.application_service = application_service

    async def execute(self, request: UpdateApplicationRequest) -> ApplicationResponse:
        """Execute update application flow.

        Raises:
            ValidationError: If a field is blank, negative or wrongly null
            NotFoundError: If it does not exist or was deleted
        """
        changes = request.model_dump(exclude_unset=True, exclude={"application_id"})
        application = await self.application_service.update(
            ApplicationId(request.application_id), **changes
        )
        return ApplicationResponse.from_application(application)
