"""Terms agreement repository interface."""

from abc import ABC, abstractmethod

from lending.domain.model.terms_agreement import TermsAgreement
from lending.domain.value import AgreementId, UserId


class TermsAgreementRepository(ABC):
    """Repository interface for TermsAgreement."""

    @abstractmethod
    async def next_id(self) -> AgreementId:
        """Reserve the next agreement ID from the store's sequence."""
        pass

    @abstractmethod
    async def save(self, agreement: TermsAgreement) -> TermsAgreement:
        """Save an agreement (create or update).

        Args:
            agreement: Agreement to save

        Returns:
            Saved agreement
        """
        pass

    @abstractmethod
    async def find_current_by_user(self, user_id: UserId) -> list[TermsAgreement]:
        """Get the user's non-deleted agreements, ordered by agreement ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            List of agreements (may be empty)
        """
        pass

    @abstractmethod
    async def supersede_current(self, user_id: UserId) -> int:
        """Soft-delete every non-deleted agreement of the user.

        Args:
            user_id: The user's unique identifier

        Returns:
            Number of agreements superseded
        """
        pass
