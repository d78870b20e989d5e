"""Update terms use case."""

from pydantic import BaseModel

from lending.domain.service import TermsService
from lending.domain.value import TermsId

from .common import TermsResponse


class UpdateTermsRequest(BaseModel):
    """Update terms request. Omitted fields keep their values."""

    terms_id: int
    name: str | None = None
    terms_detail_url: str | None = None
    content: str | None = None
    version: str | None = None
    is_required: bool | None = None


class UpdateTermsUseCase:
    """Use case for partially updating terms."""

    def __init__(self, terms_service: TermsService) -> None:
        """Initialize update terms use case.

        Args:
            terms_service: Terms domain service
        """
        self.terms_service = terms_service

    async def execute(self, request: UpdateTermsRequest) -> TermsResponse:
        """Execute update terms flow.

        Raises:
            ValidationError: If name or URL is blank
            NotFoundError: If the terms do not exist or were deleted
        """
        terms = await self.terms_service.update_terms(
            TermsId(request.terms_id),
            name=request.name,
            terms_detail_url=request.terms_detail_url,
            content=request.content,
            version=request.version,
            is_required=request.is_required,
        )
        return TermsResponse.from_terms(terms)
