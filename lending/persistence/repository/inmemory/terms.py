"""In-memory implementation of Terms repository for testing."""

from copy import deepcopy
from typing import Optional

from lending.domain.model.terms import Terms
from lending.domain.repository.terms import TermsRepository
from lending.domain.value import TermsId


class InMemoryTermsRepository(TermsRepository):
    """In-memory implementation of TermsRepository for testing."""

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._terms: dict[TermsId, Terms] = {}
        self._last_id = 0

    async def next_id(self) -> TermsId:
        """Reserve the next terms ID."""
        self._last_id += 1
        return TermsId(self._last_id)

    async def save(self, terms: Terms) -> Terms:
        """Save or update terms."""
        self._terms[terms.terms_id] = deepcopy(terms)
        return deepcopy(terms)

    async def find_by_id(
        self, terms_id: TermsId, include_deleted: bool = False
    ) -> Optional[Terms]:
        """Find terms by ID."""
        terms = self._terms.get(terms_id)
        if terms and (include_deleted or not terms.is_deleted):
            return deepcopy(terms)
        return None

    async def find_by_ids(
        self, terms_ids: list[TermsId], include_deleted: bool = False
    ) -> list[Terms]:
        """Find multiple terms by ID."""
        wanted = set(terms_ids)
        return [
            terms
            for terms in await self.find_all(include_deleted)
            if terms.terms_id in wanted
        ]

    async def find_all(self, include_deleted: bool = False) -> list[Terms]:
        """List terms ordered by ID."""
        return [
            deepcopy(terms)
            for terms_id, terms in sorted(self._terms.items())
            if include_deleted or not terms.is_deleted
        ]
