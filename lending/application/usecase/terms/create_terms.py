"""Create terms use case."""

from pydantic import BaseModel

from lending.domain.service import TermsService

from .common import TermsResponse


class CreateTermsRequest(BaseModel):
    """Create terms request."""

    name: str = ""
    terms_detail_url: str = ""
    content: str | None = None
    version: str | None = None
    is_required: bool = True


class CreateTermsUseCase:
    """Use case for publishing new terms."""

    def __init__(self, terms_service: TermsService) -> None:
        """Initialize create terms use case.

        Args:
            terms_service: Terms domain service
        """
        self.terms_service = terms_service

    async def execute(self, request: CreateTermsRequest) -> TermsResponse:
        """Execute create terms flow.

        Raises:
            ValidationError: If name or URL is missing
        """
        terms = await self.terms_service.create_terms(
            name=request.name,
            terms_detail_url=request.terms_detail_url,
            content=request.content,
            version=request.version,
            is_required=request.is_required,
        )
        return TermsResponse.from_terms(terms)
