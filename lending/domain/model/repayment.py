"""Repayment and outstanding balance entities."""

from datetime import datetime

from pydantic import Field

from lending.domain.model.common import DomainModel, utc_now
from lending.domain.value import ApplicationId, BalanceId, RepaymentId


class Repayment(DomainModel):
    """A payment against a disbursed loan."""

    repayment_id: RepaymentId
    application_id: ApplicationId
    repayment_amount: int
    is_deleted: bool = False
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class Balance(DomainModel):
    """Outstanding amount of a loan. Never negative."""

    balance_id: BalanceId
    application_id: ApplicationId
    balance: int
    is_deleted: bool = False
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
