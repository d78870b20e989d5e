"""Judgment domain service."""

from typing import Any

import logfire

from lending.domain.error import ConflictError, NotFoundError, ValidationError
from lending.domain.model import Judgment, LoanApplication
from lending.domain.model.common import utc_now
from lending.domain.repository import JudgmentRepository, LoanApplicationRepository
from lending.domain.value import ApplicationId, ApplicationStatus, JudgmentId

from .application_service import check_not_negative
from .base import Service, check_changes

UPDATABLE_FIELDS = ("name", "approval_amount", "approval_interest_rate", "reason")


class JudgmentService(Service):
    """Domain service for underwriting decisions.

    Each judgment write moves its application to approved, rejected or
    back to pending. Judgments are frozen once the application is
    contracted.
    """

    def __init__(
        self,
        judgment_repository: JudgmentRepository,
        application_repository: LoanApplicationRepository,
    ) -> None:
        """Initialize judgment service.

        Args:
            judgment_repository: Judgment repository
            application_repository: Loan application repository
        """
        self.judgment_repository = judgment_repository
        self.application_repository = application_repository

    async def create(
        self,
        application_id: ApplicationId,
        name: str,
        approval_amount: int,
        approval_interest_rate: float,
        reason: str | None = None,
    ) -> Judgment:
        """Judge an application.

        Args:
            application_id: Application being judged
            name: Reviewer name
            approval_amount: Approved amount; zero rejects the application
            approval_interest_rate: Approved annual rate, percent
            reason: Optional explanation

        Returns:
            Created judgment

        Raises:
            ValidationError: If the reviewer name is blank, an amount is
                negative, or the application is already contracted
            NotFoundError: If the application does not exist or was deleted
            ConflictError: If the application already has a judgment
        """
        if not name or not name.strip():
            raise ValidationError("Judgment name is required")
        check_not_negative(
            {
                "approval_amount": approval_amount,
                "approval_interest_rate": approval_interest_rate,
            }
        )

        with logfire.span("judgment_service.create", application_id=application_id):
            application = await self._open_application(application_id)
            if await self.judgment_repository.find_by_application(application_id):
                logfire.warn("Judgment already exists", application_id=application_id)
                raise ConflictError("Judgment", f"application {application_id}")

            now = utc_now()
            judgment = Judgment(
                judgment_id=await self.judgment_repository.next_id(),
                application_id=application_id,
                name=name,
                approval_amount=approval_amount,
                approval_interest_rate=approval_interest_rate,
                reason=reason,
                created_at=now,
                updated_at=now,
            )
            saved = await self.judgment_repository.save(judgment)
            await self._apply_to_application(application, saved)
            logfire.info(
                "Judgment recorded",
                judgment_id=saved.judgment_id,
                application_id=application_id,
                approved=saved.is_approval,
            )
            return saved

    async def list_judgments(self) -> list[Judgment]:
        """List active judgments, newest first."""
        with logfire.span("judgment_service.list_judgments"):
            return await self.judgment_repository.find_all()

    async def get(self, judgment_id: JudgmentId) -> Judgment:
        """Get an active judgment.

        Raises:
            NotFoundError: If it does not exist or was deleted
        """
        judgment = await self.judgment_repository.find_by_id(judgment_id)
        if not judgment:
            logfire.warn("Judgment not found", judgment_id=judgment_id)
            raise NotFoundError("Judgment", str(judgment_id))
        return judgment

    async def get_for_application(self, application_id: ApplicationId) -> Judgment:
        """Get the active judgment of an application.

        Raises:
            NotFoundError: If the application has no judgment
        """
        judgment = await self.judgment_repository.find_by_application(application_id)
        if not judgment:
            raise NotFoundError("Judgment", f"application {application_id}")
        return judgment

    async def update(self, judgment_id: JudgmentId, **changes: Any) -> Judgment:
        """Revise a judgment and re-derive its application's status.

        ``reason`` may be passed as None to clear it.

        Raises:
            ValidationError: If a field is unknown, blank, negative or
                wrongly cleared, or the application is already contracted
            NotFoundError: If the judgment does not exist or was deleted
        """
        check_changes(
            "Judgment",
            changes,
            UPDATABLE_FIELDS,
            nullable=("reason",),
            required_text=("name",),
        )
        check_not_negative(
            {
                f: changes[f]
                for f in ("approval_amount", "approval_interest_rate")
                if f in changes
            }
        )

        with logfire.span("judgment_service.update", judgment_id=judgment_id):
            judgment = await self.get(judgment_id)
            application = await self._open_application(judgment.application_id)
            saved = await self.judgment_repository.save(
                judgment.model_copy(update={**changes, "updated_at": utc_now()})
            )
            await self._apply_to_application(application, saved)
            logfire.info("Judgment updated", judgment_id=judgment_id)
            return saved

    async def delete(self, judgment_id: JudgmentId) -> None:
        """Soft-delete a judgment, returning its application to pending.

        Raises:
            ValidationError: If the application is already contracted
            NotFoundError: If the judgment does not exist or was deleted
        """
        with logfire.span("judgment_service.delete", judgment_id=judgment_id):
            judgment = await self.get(judgment_id)
            application = await self._open_application(judgment.application_id)
            await self.judgment_repository.save(
                judgment.model_copy(
                    update={"is_deleted": True, "updated_at": utc_now()}
                )
            )
            await self._apply_to_application(application, None)
            logfire.info("Judgment deleted", judgment_id=judgment_id)

    async def _open_application(
        self, application_id: ApplicationId
    ) -> LoanApplication:
        """Load an application whose judgment may still change."""
        application = await self.application_repository.find_by_id(application_id)
        if not application:
            logfire.warn("Application not found", application_id=application_id)
            raise NotFoundError("Application", str(application_id))
        if application.is_contracted:
            raise ValidationError("Application has already been contracted")
        return application

    async def _apply_to_application(
        self, application: LoanApplication, judgment: Judgment | None
    ) -> None:
        if judgment is None:
            status, approval_amount = ApplicationStatus.PENDING, None
        elif judgment.is_approval:
            status = ApplicationStatus.APPROVED
            approval_amount = judgment.approval_amount
        else:
            status, approval_amount = ApplicationStatus.REJECTED, None
        await self.application_repository.save(
            application.model_copy(
                update={
                    "status": status,
                    "approval_amount": approval_amount,
                    "updated_at": utc_now(),
                }
            )
        )
