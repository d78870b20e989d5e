"""Delete loan application use case."""

from pydantic import BaseModel

from lending.domain.service import ApplicationService
from lending.domain.value import ApplicationId


class DeleteApplicationRequest(BaseModel):
    """Delete application request."""

    application_id: int


class DeleteApplicationResponse(BaseModel):
    """Delete application response."""

    application_id: int
    deleted: bool


class DeleteApplicationUseCase:
    """Use case for soft-deleting a loan application."""

    def __init__(self, application_service: ApplicationService) -> None:
        self.application_service = application_service

    async def execute(
        self, request: DeleteApplicationRequest
    ) -> DeleteApplicationResponse:
        """Execute delete application flow.

        Raises:
            NotFoundError: If it does not exist or was already deleted
        """
        await self.application_service.delete(ApplicationId(request.application_id))
        return DeleteApplicationResponse(
            application_id=request.application_id, deleted=True
        )
