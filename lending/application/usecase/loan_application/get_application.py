"""Get loan application use case."""

from pydantic import BaseModel

from lending.domain.service import ApplicationService
from lending.domain.value import ApplicationId

from .common import ApplicationResponse


class GetApplicationRequest(BaseModel):
    """Get application request."""

    application_id: int


class GetApplicationUseCase:
    """Use case for getting a loan application by ID."""

    def __init__(self, application_service: ApplicationService) -> None:
        self.application_service = application_service

    async def execute(self, request: GetApplicationRequest) -> ApplicationResponse:
        """Execute get application flow.

        Raises:
            NotFoundError: If it does not exist or was deleted
        """
        application = await self.application_service.get(
            ApplicationId(request.application_id)
        )
        return ApplicationResponse.from_application(application)
