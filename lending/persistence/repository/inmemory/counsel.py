"""In-memory implementation of Counsel repository for testing."""

from copy import deepcopy
from typing import Optional

from lending.domain.model.counsel import Counsel
from lending.domain.repository.counsel import CounselRepository
from lending.domain.value import CounselId


class InMemoryCounselRepository(CounselRepository):
    """In-memory implementation of CounselRepository for testing."""

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._counsels: dict[CounselId, Counsel] = {}
        self._last_id = 0

    async def next_id(self) -> CounselId:
        """Reserve the next counsel ID."""
        self._last_id += 1
        return CounselId(self._last_id)

    async def save(self, counsel: Counsel) -> Counsel:
        """Save or update a counsel request."""
        self._counsels[counsel.counsel_id] = deepcopy(counsel)
        return deepcopy(counsel)

    async def find_by_id(self, counsel_id: CounselId) -> Optional[Counsel]:
        """Find an active counsel request by ID."""
        counsel = self._counsels.get(counsel_id)
        if counsel and not counsel.is_deleted:
            return deepcopy(counsel)
        return None

    async def find_all(self) -> list[Counsel]:
        """List active counsel requests, most recent first."""
        active = [c for c in self._counsels.values() if not c.is_deleted]
        active.sort(key=lambda c: (c.applied_at, c.counsel_id), reverse=True)
        return deepcopy(active)
