"""Get terms use case."""

from pydantic import BaseModel

from lending.domain.service import TermsService
from lending.domain.value import TermsId

from .common import TermsResponse


class GetTermsRequest(BaseModel):
    """Get terms request."""

    terms_id: int


class GetTermsUseCase:
    """Use case for getting active terms by ID."""

    def __init__(self, terms_service: TermsService) -> None:
        """Initialize get terms use case.

        Args:
            terms_service: Terms domain service
        """
        self.terms_service = terms_service

    async def execute(self, request: GetTermsRequest) -> TermsResponse:
        """Execute get terms flow.

        Raises:
            NotFoundError: If the terms do not exist or were deleted
        """
        terms = await self.terms_service.get_terms(TermsId(request.terms_id))
        return TermsResponse.from_terms(terms)
