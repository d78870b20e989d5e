"""Agree to terms use case."""

from datetime import datetime

from pydantic import BaseModel

from lending.domain.service import TermsAgreementService
from lending.domain.value import TermsId, UserId


class AgreeToTermsRequest(BaseModel):
    """Agree to terms request."""

    user_id: str  # From authenticated user
    terms_ids: list[int]


class AgreementItem(BaseModel):
    """Recorded agreement in response."""

    agreement_id: int
    terms_id: int
    agreed_at: datetime


class AgreeToTermsResponse(BaseModel):
    """Agree to terms response."""

    user_id: str
    agreements: list[AgreementItem]


class AgreeToTermsUseCase:
    """Use case for replacing a user's current terms agreements."""

    def __init__(self, agreement_service: TermsAgreementService) -> None:
        """Initialize agree to terms use case.

        Args:
            agreement_service: Terms agreement domain service
        """
        self.agreement_service = agreement_service

    async def execute(self, request: AgreeToTermsRequest) -> AgreeToTermsResponse:
        """Execute agree to terms flow.

        Raises:
            ValidationError: If no terms IDs are given
            NotFoundError: If any terms ID is unknown or deleted
        """
        agreements = await self.agreement_service.agree(
            UserId(request.user_id),
            [TermsId(terms_id) for terms_id in request.terms_ids],
        )
        return AgreeToTermsResponse(
            user_id=request.user_id,
            agreements=[
                AgreementItem(
                    agreement_id=agreement.agreement_id,
                    terms_id=agreement.terms_id,
                    agreed_at=agreement.created_at,
                )
                for agreement in agreements
            ],
        )
