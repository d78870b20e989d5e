"""In-memory implementation of LoanApplication repository for testing."""

from copy import deepcopy
from typing import Optional

from lending.domain.model.loan_application import LoanApplication
from lending.domain.repository.loan_application import LoanApplicationRepository
from lending.domain.value import ApplicationId


class InMemoryLoanApplicationRepository(LoanApplicationRepository):
    """In-memory implementation of LoanApplicationRepository for testing."""

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._applications: dict[ApplicationId, LoanApplication] = {}
        self._last_id = 0

    async def next_id(self) -> ApplicationId:
        """Reserve the next application ID."""
        self._last_id += 1
        return ApplicationId(self._last_id)

    async def save(self, application: LoanApplication) -> LoanApplication:
        """Save or update an application."""
        self._applications[application.application_id] = deepcopy(application)
        return deepcopy(application)

    async def find_by_id(
        self, application_id: ApplicationId
    ) -> Optional[LoanApplication]:
        """Find an active application by ID."""
        application = self._applications.get(application_id)
        if application and not application.is_deleted:
            return deepcopy(application)
        return None

    async def find_all(self) -> list[LoanApplication]:
        """List active applications, most recent first."""
        active = [a for a in self._applications.values() if not a.is_deleted]
        active.sort(key=lambda a: (a.applied_at, a.application_id), reverse=True)
        return deepcopy(active)
