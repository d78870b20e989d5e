"""Terms agreement domain service."""

from dataclasses import dataclass

import logfire

from lending.domain.error import NotFoundError, ValidationError
from lending.domain.model import Terms, TermsAgreement
from lending.domain.model.common import utc_now
from lending.domain.repository import TermsAgreementRepository, TermsRepository
from lending.domain.value import TermsId, UserId

from .base import Service


@dataclass
class AgreedTerms:
    """An agreement together with the terms it refers to."""

    agreement: TermsAgreement
    terms: Terms


@dataclass
class AgreementStatus:
    """Whether a user has agreed to every required terms document."""

    has_agreed_to_all_required: bool
    missing_required_terms: list[Terms]


class TermsAgreementService(Service):
    """Domain service for the per-user terms agreement workflow."""

    def __init__(
        self,
        agreement_repository: TermsAgreementRepository,
        terms_repository: TermsRepository,
    ) -> None:
        """Initialize terms agreement service.

        Args:
            agreement_repository: Terms agreement repository
            terms_repository: Terms repository
        """
        self.agreement_repository = agreement_repository
        self.terms_repository = terms_repository

    async def agree(
        self, user_id: UserId, terms_ids: list[TermsId]
    ) -> list[TermsAgreement]:
        """Replace the user's current agreement set.

        Every terms ID is checked before anything is written, so an unknown
        ID leaves the current set untouched.

        Args:
            user_id: User agreeing to the terms
            terms_ids: Terms the user agrees to (duplicates are collapsed)

        Returns:
            The new agreements, in the order given

        Raises:
            ValidationError: If the user ID is blank or no terms are given
            NotFoundError: If any terms ID is unknown or deleted
        """
        if not user_id or not user_id.strip():
            raise ValidationError("User ID is required")
        if not terms_ids:
            raise ValidationError("At least one terms ID is required")

        unique_ids = list(dict.fromkeys(terms_ids))

        with logfire.span(
            "terms_agreement_service.agree", user_id=user_id, terms_ids=unique_ids
        ):
            found = {
                terms.terms_id
                for terms in await self.terms_repository.find_by_ids(unique_ids)
            }
            for terms_id in unique_ids:
                if terms_id not in found:
                    logfire.warn(
                        "Agreement rejected, terms not found",
                        user_id=user_id,
                        terms_id=terms_id,
                    )
                    raise NotFoundError("Terms", str(terms_id))

            superseded = await self.agreement_repository.supersede_current(user_id)

            now = utc_now()
            agreements = []
            for terms_id in unique_ids:
                agreement = TermsAgreement(
                    agreement_id=await self.agreement_repository.next_id(),
                    user_id=user_id,
                    terms_id=terms_id,
                    created_at=now,
                    updated_at=now,
                )
                agreements.append(await self.agreement_repository.save(agreement))

            logfire.info(
                "Terms agreements recorded",
                user_id=user_id,
                count=len(agreements),
                superseded=superseded,
            )
            return agreements

    async def list_for_user(self, user_id: UserId) -> list[AgreedTerms]:
        """Get the user's current agreements with their terms.

        Terms deleted after the user agreed are still included.

        Raises:
            ValidationError: If the user ID is blank
        """
        if not user_id or not user_id.strip():
            raise ValidationError("User ID is required")

        with logfire.span("terms_agreement_service.list_for_user", user_id=user_id):
            agreements = await self.agreement_repository.find_current_by_user(user_id)
            terms_by_id = {
                terms.terms_id: terms
                for terms in await self.terms_repository.find_by_ids(
                    [agreement.terms_id for agreement in agreements],
                    include_deleted=True,
                )
            }
            return [
                AgreedTerms(agreement=agreement, terms=terms_by_id[agreement.terms_id])
                for agreement in agreements
                if agreement.terms_id in terms_by_id
            ]

    async def check(self, user_id: UserId) -> AgreementStatus:
        """Check the user's current agreements against the required terms.

        Raises:
            ValidationError: If the user ID is blank
        """
        if not user_id or not user_id.strip():
            raise ValidationError("User ID is required")

        with logfire.span("terms_agreement_service.check", user_id=user_id):
            required = [
                terms for terms in await self.terms_repository.find_all() if terms.is_required
            ]
            agreed = {
                agreement.terms_id
                for agreement in await self.agreement_repository.find_current_by_user(
                    user_id
                )
            }
            missing = [terms for terms in required if terms.terms_id not in agreed]
            logfire.info(
                "Terms agreements checked", user_id=user_id, missing=len(missing)
            )
            return AgreementStatus(
                has_agreed_to_all_required=not missing,
                missing_required_terms=missing,
            )
