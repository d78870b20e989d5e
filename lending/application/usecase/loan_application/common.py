"""Shared response models for loan application use cases."""

from datetime import datetime

from pydantic import BaseModel

from lending.domain.model import LoanApplication
from lending.domain.value import ApplicationStatus


class ApplicationResponse(BaseModel):
    """Loan application as returned to API clients."""

    application_id: int
    name: str
    cell_phone: str
    email: str
    interest_rate: float | None
    fee: int | None
    maturity: datetime | None
    hope_amount: int | None
    applied_at: datetime
    approval_amount: int | None
    contracted_at: datetime | None
    status: ApplicationStatus
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_application(cls, application: LoanApplication) -> "ApplicationResponse":
        """Build the response from a domain application."""
        return cls(
            application_id=application.application_id,
            name=application.name,
            cell_phone=application.cell_phone,
            email=application.email,
            interest_rate=application.interest_rate,
            fee=application.fee,
            maturity=application.maturity,
            hope_amount=application.hope_amount,
            applied_at=application.applied_at,
            approval_amount=application.approval_amount,
            contracted_at=application.contracted_at,
            status=application.status,
            created_at=application.created_at,
            updated_at=application.updated_at,
        )
