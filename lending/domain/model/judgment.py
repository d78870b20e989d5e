"""Judgment entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from lending.domain.model.common import DomainModel, utc_now
from lending.domain.value import ApplicationId, JudgmentId


class Judgment(DomainModel):
    """Underwriting decision on a loan application.

    An application has at most one active judgment. An approval amount of
    zero is a rejection.
    """

    judgment_id: JudgmentId
    application_id: ApplicationId
    name: str  # Reviewer
    approval_amount: int
    approval_interest_rate: float
    reason: Optional[str] = None
    is_deleted: bool = False
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def is_approval(self) -> bool:
        return self.approval_amount > 0
