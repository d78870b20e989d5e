"""Shared response models for terms use cases."""

from datetime import datetime

from pydantic import BaseModel

from lending.domain.model import Terms


class TermsResponse(BaseModel):
    """Terms as returned to API clients."""

    terms_id: int
    name: str
    terms_detail_url: str
    content: str | None
    version: str | None
    is_required: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_terms(cls, terms: Terms) -> "TermsResponse":
        """Build the response from domain terms."""
        return cls(
            terms_id=terms.terms_id,
            name=terms.name,
            terms_detail_url=terms.terms_detail_url,
            content=terms.content,
            version=terms.version,
            is_required=terms.is_required,
            created_at=terms.created_at,
            updated_at=terms.updated_at,
        )
