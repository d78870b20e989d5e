"""Consultation request entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from lending.domain.model.common import DomainModel, utc_now
from lending.domain.value import CounselId


class Counsel(DomainModel):
    """A prospective borrower asking to be contacted before applying."""

    counsel_id: CounselId
    name: str
    cell_phone: str
    email: str
    memo: Optional[str] = None
    address: Optional[str] = None
    address_detail: Optional[str] = None
    zip_code: Optional[str] = None
    applied_at: datetime = Field(default_factory=utc_now)  # Requested contact time
    is_deleted: bool = False
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
