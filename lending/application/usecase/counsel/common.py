"""Shared response models for counsel use cases."""

from datetime import datetime

from pydantic import BaseModel

from lending.domain.model import Counsel


class CounselResponse(BaseModel):
    """Counsel request as returned to API clients."""

    counsel_id: int
    name: str
    cell_phone: str
    email: str
    memo: str | None
    address: str | None
    address_detail: str | None
    zip_code: str | None
    applied_at: datetime
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_counsel(cls, counsel: Counsel) -> "CounselResponse":
        """Build the response from a domain counsel request."""
        return cls(
            counsel_id=counsel.counsel_id,
            name=counsel.name,
            cell_phone=counsel.cell_phone,
            email=counsel.email,
            memo=counsel.memo,
            address=counsel.address,
            address_detail=counsel.address_detail,
            zip_code=counsel.zip_code,
            applied_at=counsel.applied_at,
            created_at=counsel.created_at,
            updated_at=counsel.updated_at,
        )
