"""Terms and conditions entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from lending.domain.model.common import DomainModel, utc_now
from lending.domain.value import TermsId


class Terms(DomainModel):
    """A published terms document users can agree to.

    Required terms must be agreed to before a user may apply for a loan.
    """

    terms_id: TermsId
    name: str
    terms_detail_url: str
    content: Optional[str] = None
    version: Optional[str] = None
    is_required: bool = True
    is_deleted: bool = False
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
