"""Check terms agreements use case."""

from pydantic import BaseModel

from lending.domain.service import TermsAgreementService
from lending.domain.value import UserId

from .common import TermsResponse


class CheckAgreementsRequest(BaseModel):
    """Check agreements request."""

    user_id: str  # From authenticated user


class CheckAgreementsResponse(BaseModel):
    """Check agreements response."""

    has_agreed_to_all_required: bool
    missing_required_terms: list[TermsResponse]


class CheckAgreementsUseCase:
    """Use case for checking whether a user agreed to all required terms."""

    def __init__(self, agreement_service: TermsAgreementService) -> None:
        """Initialize check agreements use case.

        Args:
            agreement_service: Terms agreement domain service
        """
        self.agreement_service = agreement_service

    async def execute(
        self, request: CheckAgreementsRequest
    ) -> CheckAgreementsResponse:
        """Execute check agreements flow."""
        status = await self.agreement_service.check(UserId(request.user_id))
        return CheckAgreementsResponse(
            has_agreed_to_all_required=status.has_agreed_to_all_required,
            missing_required_terms=[
                TermsResponse.from_terms(terms)
                for terms in status.missing_required_terms
            ],
        )
