"""Get current user's terms agreements use case."""

from datetime import datetime

from pydantic import BaseModel

from lending.domain.service import TermsAgreementService
from lending.domain.value import UserId

from .common import TermsResponse


class GetAgreementsRequest(BaseModel):
    """Get agreements request."""

    user_id: str  # From authenticated user


class AgreedTermsItem(BaseModel):
    """Current agreement with the terms it covers."""

    agreement_id: int
    agreed_at: datetime
    terms: TermsResponse


class GetAgreementsResponse(BaseModel):
    """Get agreements response."""

    agreements: list[AgreedTermsItem]


class GetAgreementsUseCase:
    """Use case for listing a user's current terms agreements."""

    def __init__(self, agreement_service: TermsAgreementService) -> None:
        """Initialize get agreements use case.

        Args:
            agreement_service: Terms agreement domain service
        """
        self.agreement_service = agreement_service

    async def execute(self, request: GetAgreementsRequest) -> GetAgreementsResponse:
        """Execute get agreements flow."""
        agreed = await self.agreement_service.list_for_user(UserId(request.user_id))
        return GetAgreementsResponse(
            agreements=[
                AgreedTermsItem(
                    agreement_id=item.agreement.agreement_id,
                    agreed_at=item.agreement.created_at,
                    terms=TermsResponse.from_terms(item.terms),
                )
                for item in agreed
            ]
        )
