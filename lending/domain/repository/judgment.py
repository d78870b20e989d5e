"""Judgment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from lending.domain.model.judgment import Judgment
from lending.domain.value import ApplicationId, JudgmentId


class JudgmentRepository(ABC):
    """Repository interface for Judgment."""

    @abstractmethod
    async def next_id(self) -> JudgmentId:
        """Reserve the next judgment ID from the store's sequence."""
        pass

    @abstractmethod
    async def save(self, judgment: Judgment) -> Judgment:
        """Save a judgment (create or update)."""
        pass

    @abstractmethod
    async def find_by_id(self, judgment_id: JudgmentId) -> Optional[Judgment]:
        """Find an active judgment by ID."""
        pass

    @abstractmethod
    async def find_by_application(
        self, application_id: ApplicationId
    ) -> Optional[Judgment]:
        """Find the active judgment of an application, if any."""
        pass

    @abstractmethod
    async def find_all(self) -> list[Judgment]:
        """List active judgments, newest first."""
        pass
