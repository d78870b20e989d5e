"""In-memory implementation of TermsAgreement repository for testing."""

from copy import deepcopy

from lending.domain.model.common import utc_now
from lending.domain.model.terms_agreement import TermsAgreement
from lending.domain.repository.terms_agreement import TermsAgreementRepository
from lending.domain.value import AgreementId, UserId


class InMemoryTermsAgreementRepository(TermsAgreementRepository):
    """In-memory implementation of TermsAgreementRepository for testing."""

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._agreements: dict[AgreementId, TermsAgreement] = {}
        self._last_id = 0

    async def next_id(self) -> AgreementId:
        """Reserve the next agreement ID."""
        self._last_id += 1
        return AgreementId(self._last_id)

    async def save(self, agreement: TermsAgreement) -> TermsAgreement:
        """Save or update an agreement."""
        self._agreements[agreement.agreement_id] = deepcopy(agreement)
        return deepcopy(agreement)

    async def find_current_by_user(self, user_id: UserId) -> list[TermsAgreement]:
        """Get the user's non-deleted agreements."""
        return [
            deepcopy(agreement)
            for _, agreement in sorted(self._agreements.items())
            if agreement.user_id == user_id and not agreement.is_deleted
        ]

    async def supersede_current(self, user_id: UserId) -> int:
        """Soft-delete the user's current agreements."""
        now = utc_now()
        current = await self.find_current_by_user(user_id)
        for agreement in current:
            self._agreements[agreement.agreement_id] = agreement.model_copy(
                update={"is_deleted": True, "updated_at": now}
            )
        return len(current)
