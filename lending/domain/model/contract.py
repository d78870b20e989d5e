"""Loan contract entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from lending.domain.model.common import DomainModel, utc_now
from lending.domain.value import (
    ApplicationId,
    ContractId,
    ContractStatus,
    JudgmentId,
)


class Contract(DomainModel):
    """Contract drawn up from an application's judgment.

    Activating the contract disburses the loan and opens its balance.
    """

    contract_id: ContractId
    application_id: ApplicationId
    judgment_id: JudgmentId
    amount: int
    interest_rate: float
    term: int  # Months
    status: ContractStatus = ContractStatus.PENDING
    signed_at: Optional[datetime] = None
    activated_at: Optional[datetime] = None
    is_deleted: bool = False
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
