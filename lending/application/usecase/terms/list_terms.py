"""List terms use case."""

import logfire
from pydantic import BaseModel

from lending.domain.service import TermsService

from .common import TermsResponse


class ListTermsResponse(BaseModel):
    """List terms response."""

    terms: list[TermsResponse]


class ListTermsUseCase:
    """Use case for listing the active terms catalogue."""

    def __init__(self, terms_service: TermsService) -> None:
        """Initialize list terms use case.

        Args:
            terms_service: Terms domain service
        """
        self.terms_service = terms_service

    async def execute(self) -> ListTermsResponse:
        """Execute list terms flow."""
        with logfire.span("list_terms.execute"):
            terms = await self.terms_service.list_terms()
            logfire.info("Terms listed", count=len(terms))
            return ListTermsResponse(
                terms=[TermsResponse.from_terms(item) for item in terms]
            )
