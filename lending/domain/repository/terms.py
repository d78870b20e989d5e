"""Terms repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from lending.domain.model.terms import Terms
from lending.domain.value import TermsId


class TermsRepository(ABC):
    """Repository interface for Terms."""

    @abstractmethod
    async def next_id(self) -> TermsId:
        """Reserve the next terms ID from the store's sequence."""
        pass

    @abstractmethod
    async def save(self, terms: Terms) -> Terms:
        """Save terms (create or update).

        Args:
            terms: Terms to save

        Returns:
            Saved terms
        """
        pass

    @abstractmethod
    async def find_by_id(
        self, terms_id: TermsId, include_deleted: bool = False
    ) -> Optional[Terms]:
        """Find terms by ID.

        Args:
            terms_id: Terms identifier
            include_deleted: Also match soft-deleted terms

        Returns:
            Terms if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(
        self, terms_ids: list[TermsId], include_deleted: bool = False
    ) -> list[Terms]:
        """Find all terms with the given IDs.

        Args:
            terms_ids: Terms identifiers
            include_deleted: Also match soft-deleted terms

        Returns:
            Matching terms (missing IDs are skipped), ordered by ID
        """
        pass

    @abstractmethod
    async def find_all(self, include_deleted: bool = False) -> list[Terms]:
        """List terms ordered by ID, ascending.

        Args:
            include_deleted: Also return soft-deleted terms

        Returns:
            List of terms
        """
        pass
