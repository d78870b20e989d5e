"""Counsel repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from lending.domain.model.counsel import Counsel
from lending.domain.value import CounselId


class CounselRepository(ABC):
    """Repository interface for Counsel."""

    @abstractmethod
    async def next_id(self) -> CounselId:
        """Reserve the next counsel ID from the store's sequence."""
        pass

    @abstractmethod
    async def save(self, counsel: Counsel) -> Counsel:
        """Save a counsel request (create or update)."""
        pass

    @abstractmethod
    async def find_by_id(self, counsel_id: CounselId) -> Optional[Counsel]:
        """Find an active counsel request by ID."""
        pass

    @abstractmethod
    async def find_all(self) -> list[Counsel]:
        """List active counsel requests, most recent ``applied_at`` first."""
        pass
