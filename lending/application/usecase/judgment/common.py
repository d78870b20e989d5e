"""Shared response models for judgment use cases."""

from datetime import datetime

from pydantic import BaseModel

from lending.domain.model import Judgment


class JudgmentResponse(BaseModel):
    """Judgment as returned to API clients."""

    judgment_id: int
    application_id: int
    name: str
    approval_amount: int
    approval_interest_rate: float
    reason: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_judgment(cls, judgment: Judgment) -> "JudgmentResponse":
        """Build the response from a domain judgment."""
        return cls(
            judgment_id=judgment.judgment_id,
            application_id=judgment.application_id,
            name=judgment.name,
            approval_amount=judgment.approval_amount,
            approval_interest_rate=judgment.approval_interest_rate,
            reason=judgment.reason,
            created_at=judgment.created_at,
            updated_at=judgment.updated_at,
        )
