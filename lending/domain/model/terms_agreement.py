"""Terms agreement entity."""

from datetime import datetime

from pydantic import Field

from lending.domain.model.common import DomainModel, utc_now
from lending.domain.value import AgreementId, TermsId, UserId


class TermsAgreement(DomainModel):
    """Record of a user agreeing to one terms document.

    A user's non-deleted agreements form their current agreement set.
    Submitting a new set soft-deletes the previous one.
    """

    agreement_id: AgreementId
    user_id: UserId
    terms_id: TermsId
    is_deleted: bool = False
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
