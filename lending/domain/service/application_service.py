"""Loan application domain service."""

from datetime import datetime
from typing import Any

import logfire

from lending.domain.error import ConflictError, NotFoundError, ValidationError
from lending.domain.model import LoanApplication
from lending.domain.model.common import utc_now
from lending.domain.repository import JudgmentRepository, LoanApplicationRepository
from lending.domain.value import ApplicationId, ApplicationStatus

from .base import Service, check_changes
from .counsel_service import CONTACT_FIELDS, check_contact

UPDATABLE_FIELDS = (
    "name",
    "cell_phone",
    "email",
    "interest_rate",
    "fee",
    "maturity",
    "hope_amount",
)
NULLABLE_FIELDS = ("interest_rate", "fee", "maturity", "hope_amount")
AMOUNT_FIELDS = ("interest_rate", "fee", "hope_amount")


def check_not_negative(values: dict[str, Any]) -> None:
    """Reject negative amounts and rates.

    Raises:
        ValidationError: Naming the first negative field
    """
    for field, value in values.items():
        if value is not None and value < 0:
            raise ValidationError(f"{field} cannot be negative")


class ApplicationService(Service):
    """Domain service for loan applications.

    Owns intake and contracting. Judgments move an application between
    pending, approved and rejected (see JudgmentService); contract
    activation disburses it (see ContractService).
    """

    def __init__(
        self,
        application_repository: LoanApplicationRepository,
        judgment_repository: JudgmentRepository,
    ) -> None:
        """Initialize application service.

        Args:
            application_repository: Loan application repository
            judgment_repository: Judgment repository
        """
        self.application_repository = application_repository
        self.judgment_repository = judgment_repository

    async def create(
        self,
        name: str,
        cell_phone: str,
        email: str,
        interest_rate: float | None = None,
        fee: int | None = None,
        maturity: datetime | None = None,
        hope_amount: int | None = None,
    ) -> LoanApplication:
        """Submit a loan application.

        Args:
            name: Applicant name
            cell_phone: Applicant phone number
            email: Applicant email
            interest_rate: Requested annual rate, percent
            fee: Fee the applicant accepts
            maturity: Requested maturity date
            hope_amount: Amount the applicant hopes to borrow

        Returns:
            Created application, pending judgment

        Raises:
            ValidationError: If a contact field is missing or an amount is
                negative
        """
        check_contact(name, cell_phone, email)
        check_not_negative(
            {"interest_rate": interest_rate, "fee": fee, "hope_amount": hope_amount}
        )

        with logfire.span("application_service.create"):
            now = utc_now()
            application = LoanApplication(
                application_id=await self.application_repository.next_id(),
                name=name,
                cell_phone=cell_phone,
                email=email,
                interest_rate=interest_rate,
                fee=fee,
                maturity=maturity,
                hope_amount=hope_amount,
                applied_at=now,
                created_at=now,
                updated_at=now,
            )
            saved = await self.application_repository.save(application)
            logfire.info(
                "Application submitted",
                application_id=saved.application_id,
                hope_amount=hope_amount,
            )
            return saved

    async def list_applications(self) -> list[LoanApplication]:
        """List active applications, most recent first."""
        with logfire.span("application_service.list_applications"):
            return await self.application_repository.find_all()

    async def get(self, application_id: ApplicationId) -> LoanApplication:
        """Get an active application.

        Raises:
            NotFoundError: If it does not exist or was deleted
        """
        application = await self.application_repository.find_by_id(application_id)
        if not application:
            logfire.warn("Application not found", application_id=application_id)
            raise NotFoundError("Application", str(application_id))
        return application

    async def update(
        self, application_id: ApplicationId, **changes: Any
    ) -> LoanApplication:
        """Update the applicant-supplied fields of an application.

        The optional loan terms may be passed as None to clear them.
        Workflow fields (status, approval amount, contract time) only
        change through judgment and contracting.

        Raises:
            ValidationError: If a field is unknown, blank, negative or
                wrongly cleared
            NotFoundError: If it does not exist or was deleted
        """
        check_changes(
            "Application",
            changes,
            UPDATABLE_FIELDS,
            nullable=NULLABLE_FIELDS,
            required_text=CONTACT_FIELDS,
        )
        check_not_negative({f: changes[f] for f in AMOUNT_FIELDS if f in changes})

        with logfire.span("application_service.update", application_id=application_id):
            application = await self.get(application_id)
            saved = await self.application_repository.save(
                application.model_copy(update={**changes, "updated_at": utc_now()})
            )
            logfire.info("Application updated", application_id=application_id)
            return saved

    async def delete(self, application_id: ApplicationId) -> None:
        """Soft-delete an application.

        Raises:
            NotFoundError: If it does not exist or was already deleted
        """
        with logfire.span("application_service.delete", application_id=application_id):
            application = await self.get(application_id)
            await self.application_repository.save(
                application.model_copy(
                    update={"is_deleted": True, "updated_at": utc_now()}
                )
            )
            logfire.info("Application deleted", application_id=application_id)

    async def contract(self, application_id: ApplicationId) -> LoanApplication:
        """Mark an approved application as contracted.

        The judgment's approval amount becomes the application's.

        Raises:
            NotFoundError: If the application does not exist or was deleted
            ConflictError: If it was already contracted
            ValidationError: If it has no judgment or the judgment rejected it
        """
        with logfire.span(
            "application_service.contract", application_id=application_id
        ):
            application = await self.get(application_id)
            if application.is_contracted:
                logfire.warn(
                    "Application already contracted", application_id=application_id
                )
                raise ConflictError("Application contract", str(application_id))

            judgment = await self.judgment_repository.find_by_application(
                application_id
            )
            if not judgment:
                raise ValidationError("Application has not been judged yet")
            if not judgment.is_approval:
                raise ValidationError("Application was rejected")

            now = utc_now()
            saved = await self.application_repository.save(
                application.model_copy(
                    update={
                        "status": ApplicationStatus.CONTRACTED,
                        "contracted_at": now,
                        "approval_amount": judgment.approval_amount,
                        "updated_at": now,
                    }
                )
            )
            logfire.info(
                "Application contracted",
                application_id=application_id,
                approval_amount=judgment.approval_amount,
            )
            return saved
