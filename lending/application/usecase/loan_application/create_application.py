"""Create loan application use case."""

from datetime import datetime

from pydantic import BaseModel

from lending.domain.service import ApplicationService

from .common import ApplicationResponse


class CreateApplicationRequest(BaseModel):
    """Loan application from the public intake form."""

    name: str = ""
    cell_phone: str = ""
    email: str = ""
    interest_rate: float | None = None
    fee: int | None = None
    maturity: datetime | None = None
    hope_amount: int | None = None


class CreateApplicationUseCase:
    """Use case for submitting a loan application."""

    def __init__(self, application_service: ApplicationService) -> None:
        """Initialize create application use case.

        Args:
            application_service: Loan application domain service
        """
        self.application_service = application_service

    async def execute(self, request: CreateApplicationRequest) -> ApplicationResponse:
        """Execute create application flow.

        Raises:
            ValidationError: If a contact field is missing or an amount is
                negative
        """
        application = await self.application_service.create(**request.model_dump())
        return ApplicationResponse.from_application(application)
