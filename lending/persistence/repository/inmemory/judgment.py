"""In-memory implementation of Judgment repository for testing."""

from copy import deepcopy
from typing import Optional

from lending.domain.model.judgment import Judgment
from lending.domain.repository.judgment import JudgmentRepository
from lending.domain.value import ApplicationId, JudgmentId


class InMemoryJudgmentRepository(JudgmentRepository):
    """In-memory implementation of JudgmentRepository for testing."""

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._judgments: dict[JudgmentId, Judgment] = {}
        self._last_id = 0

    async def next_id(self) -> JudgmentId:
        """Reserve the next judgment ID."""
        self._last_id += 1
        return JudgmentId(self._last_id)

    async def save(self, judgment: Judgment) -> Judgment:
        """Save or update a judgment."""
        self._judgments[judgment.judgment_id] = deepcopy(judgment)
        return deepcopy(judgment)

    async def find_by_id(self, judgment_id: JudgmentId) -> Optional[Judgment]:
        """Find an active judgment by ID."""
        judgment = self._judgments.get(judgment_id)
        if judgment and not judgment.is_deleted:
            return deepcopy(judgment)
        return None

    async def find_by_application(
        self, application_id: ApplicationId
    ) -> Optional[Judgment]:
        """Find the active judgment of an application."""
        for judgment in await self.find_all():
            if judgment.application_id == application_id:
                return judgment
        return None

    async def find_all(self) -> list[Judgment]:
        """List active judgments, newest first."""
        active = [j for j in self._judgments.values() if not j.is_deleted]
        active.sort(key=lambda j: (j.created_at, j.judgment_id), reverse=True)
        return deepcopy(active)
