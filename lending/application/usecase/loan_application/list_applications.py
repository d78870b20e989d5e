"""List loan applications use case."""

import logfire
from pydantic import BaseModel

from lending.domain.service import ApplicationService

from .common import ApplicationResponse


class ListApplicationsResponse(BaseModel):
    """List applications response."""

    applications: list[ApplicationResponse]


class ListApplicationsUseCase:
    """Use case for listing loan applications."""

    def __init__(self, application_service: ApplicationService) -> None:
        self.application_service = application_service

    async def execute(self) -> ListApplicationsResponse:
        """Execute list applications flow."""
        with logfire.span("list_applications.execute"):
            applications = await self.application_service.list_applications()
            logfire.info("Applications listed", count=len(applications))
            return ListApplicationsResponse(
                applications=[
                    ApplicationResponse.from_application(a) for a in applications
                ]
            )
