"""Loan application aggregate root.

An application moves through judgment, contracting and disbursement.
Amounts are whole currency units.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from lending.domain.model.common import DomainModel, utc_now
from lending.domain.value import ApplicationId, ApplicationStatus


class LoanApplication(DomainModel):
    """Loan application aggregate root.

    ``approval_amount`` is copied from the judgment, ``contracted_at`` is
    set once when the application is contracted and never cleared.
    """

    application_id: ApplicationId
    name: str
    cell_phone: str
    email: str
    interest_rate: Optional[float] = None  # Requested annual rate, percent
    fee: Optional[int] = None
    maturity: Optional[datetime] = None
    hope_amount: Optional[int] = None
    applied_at: datetime = Field(default_factory=utc_now)
    approval_amount: Optional[int] = None
    contracted_at: Optional[datetime] = None
    status: ApplicationStatus = ApplicationStatus.PENDING
    is_deleted: bool = False
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def is_contracted(self) -> bool:
        return self.contracted_at is not None
