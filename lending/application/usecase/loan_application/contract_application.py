"""Contract loan application use case."""

from pydantic import BaseModel

from lending.domain.service import ApplicationService
from lending.domain.value import ApplicationId

from .common import ApplicationResponse


class ContractApplicationRequest(BaseModel):
    """Contract application request."""

    application_id: int


class ContractApplicationUseCase:
    """Use case for marking an approved application as contracted."""

    def __init__(self, application_service: ApplicationService) -> None:
        """Initialize contract application use case.

        Args:
            application_service: Loan application domain service
        """
        self.application_service = application_service

    async def execute(self, request: ContractApplicationRequest) -> ApplicationResponse:
        """Execute contract application flow.

        Raises:
            NotFoundError: If the application does not exist
            ConflictError: If it was already contracted
            ValidationError: If it was never judged or was rejected
        """
        application = await self.application_service.contract(
            ApplicationId(request.application_id)
        )
        return ApplicationResponse.from_application(application)
