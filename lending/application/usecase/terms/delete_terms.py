"""Delete terms use case."""

from pydantic import BaseModel

from lending.domain.service import TermsService
from lending.domain.value import TermsId


class DeleteTermsRequest(BaseModel):
    """Delete terms request."""

    terms_id: int


class DeleteTermsResponse(BaseModel):
    """Delete terms response."""

    terms_id: int
    deleted: bool


class DeleteTermsUseCase:
    """Use case for soft-deleting terms."""

    def __init__(self, terms_service: TermsService) -> None:
        """Initialize delete terms use case.

        Args:
            terms_service: Terms domain service
        """
        self.terms_service = terms_service

    async def execute(self, request: DeleteTermsRequest) -> DeleteTermsResponse:
        """Execute delete terms flow.

        Raises:
            NotFoundError: If the terms do not exist or were deleted
        """
        await self.terms_service.delete_terms(TermsId(request.terms_id))
        return DeleteTermsResponse(terms_id=request.terms_id, deleted=True)
