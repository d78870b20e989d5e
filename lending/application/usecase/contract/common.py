"""Shared response models for contract use cases."""

from datetime import datetime

from pydantic import BaseModel

from lending.domain.model import Contract
from lending.domain.value import ContractStatus


class ContractResponse(BaseModel):
    """Contract as returned to API clients."""

    contract_id: int
    application_id: int
    judgment_id: int
    amount: int
    interest_rate: float
    term: int
    status: ContractStatus
    signed_at: datetime | None
    activated_at: datetime | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_contract(cls, contract: Contract) -> "ContractResponse":
        """Build the response from a domain contract."""
        return cls(
            contract_id=contract.contract_id,
            application_id=contract.application_id,
            judgment_id=contract.judgment_id,
            amount=contract.amount,
            interest_rate=contract.interest_rate,
            term=contract.term,
            status=contract.status,
            signed_at=contract.signed_at,
            activated_at=contract.activated_at,
            created_at=contract.created_at,
            updated_at=contract.updated_at,
        )
