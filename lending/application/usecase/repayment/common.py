"""Shared response models for repayment use cases."""

from datetime import datetime

from pydantic import BaseModel

from lending.domain.model import Balance, Repayment


class RepaymentResponse(BaseModel):
    """Repayment as returned to API clients."""

    repayment_id: int
    application_id: int
    repayment_amount: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_repayment(cls, repayment: Repayment) -> "RepaymentResponse":
        """Build the response from a domain repayment."""
        return cls(
            repayment_id=repayment.repayment_id,
            application_id=repayment.application_id,
            repayment_amount=repayment.repayment_amount,
            created_at=repayment.created_at,
            updated_at=repayment.updated_at,
        )


class BalanceResponse(BaseModel):
    """Outstanding balance as returned to API clients."""

    balance_id: int
    application_id: int
    balance: int
    updated_at: datetime

    @classmethod
    def from_balance(cls, balance: Balance) -> "BalanceResponse":
        """Build the response from a domain balance."""
        return cls(
            balance_id=balance.balance_id,
            application_id=balance.application_id,
            balance=balance.balance,
            updated_at=balance.updated_at,
        )
