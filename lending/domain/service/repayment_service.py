"""Repayment domain service."""

import logfire

from lending.domain.error import NotFoundError, ValidationError
from lending.domain.model import Balance, LoanApplication, Repayment
from lending.domain.model.common import utc_now
from lending.domain.repository import (
    BalanceRepository,
    LoanApplicationRepository,
    RepaymentRepository,
)
from lending.domain.value import ApplicationId, RepaymentId

from .base import Service


class RepaymentService(Service):
    """Domain service for repayments against a disbursed loan.

    Every repayment lowers the application's balance by its amount in the
    same transaction; the balance never goes negative.
    """

    def __init__(
        self,
        repayment_repository: RepaymentRepository,
        balance_repository: BalanceRepository,
        application_repository: LoanApplicationRepository,
    ) -> None:
        """Initialize repayment service.

        Args:
            repayment_repository: Repayment repository
            balance_repository: Balance repository
            application_repository: Loan application repository
        """
        self.repayment_repository = repayment_repository
        self.balance_repository = balance_repository
        self.application_repository = application_repository

    async def repay(self, application_id: ApplicationId, amount: int) -> Repayment:
        """Record a repayment and lower the balance.

        Args:
            application_id: Contracted application being repaid
            amount: Amount repaid

        Returns:
            Created repayment

        Raises:
            ValidationError: If the amount is not positive, the application
                is not contracted, it has no balance, or the balance is
                smaller than the amount
            NotFoundError: If the application does not exist or was deleted
        """
        if amount <= 0:
            raise ValidationError("Repayment amount must be greater than 0")

        with logfire.span(
            "repayment_service.repay", application_id=application_id, amount=amount
        ):
            application = await self._get_application(application_id)
            if not application.is_contracted:
                raise ValidationError("Application has not been contracted yet")
            if not await self.balance_repository.find_by_application(application_id):
                raise ValidationError("No balance found for this application")

            balance = await self.balance_repository.adjust(application_id, -amount)
            if not balance:
                logfire.warn(
                    "Repayment exceeds balance",
                    application_id=application_id,
                    amount=amount,
                )
                raise ValidationError("Insufficient balance for repayment")

            now = utc_now()
            repayment = await self.repayment_repository.save(
                Repayment(
                    repayment_id=await self.repayment_repository.next_id(),
                    application_id=application_id,
                    repayment_amount=amount,
                    created_at=now,
                    updated_at=now,
                )
            )
            logfire.info(
                "Repayment recorded",
                repayment_id=repayment.repayment_id,
                application_id=application_id,
                remaining=balance.balance,
            )
            return repayment

    async def list_for_application(
        self, application_id: ApplicationId
    ) -> list[Repayment]:
        """List an application's repayments, newest first.

        Raises:
            NotFoundError: If the application does not exist or was deleted
        """
        with logfire.span(
            "repayment_service.list_for_application", application_id=application_id
        ):
            await self._get_application(application_id)
            return await self.repayment_repository.find_by_application(application_id)

    async def get(self, repayment_id: RepaymentId) -> Repayment:
        """Get an active repayment.

        Raises:
            NotFoundError: If it does not exist or was deleted
        """
        repayment = await self.repayment_repository.find_by_id(repayment_id)
        if not repayment:
            logfire.warn("Repayment not found", repayment_id=repayment_id)
            raise NotFoundError("Repayment", str(repayment_id))
        return repayment

    async def delete(self, repayment_id: RepaymentId) -> None:
        """Soft-delete a repayment and restore its amount to the balance.

        Raises:
            NotFoundError: If the repayment does not exist, or the balance
                it was taken from is gone
        """
        with logfire.span("repayment_service.delete", repayment_id=repayment_id):
            repayment = await self.get(repayment_id)
            restored = await self.balance_repository.adjust(
                repayment.application_id, repayment.repayment_amount
            )
            if not restored:
                raise NotFoundError(
                    "Balance", f"application {repayment.application_id}"
                )
            await self.repayment_repository.save(
                repayment.model_copy(
                    update={"is_deleted": True, "updated_at": utc_now()}
                )
            )
            logfire.info(
                "Repayment reversed",
                repayment_id=repayment_id,
                balance=restored.balance,
            )

    async def get_balance(self, application_id: ApplicationId) -> Balance:
        """Get the outstanding balance of an application.

        Raises:
            NotFoundError: If the application does not exist or has no
                balance yet
        """
        await self._get_application(application_id)
        balance = await self.balance_repository.find_by_application(application_id)
        if not balance:
            raise NotFoundError("Balance", f"application {application_id}")
        return balance

    async def _get_application(self, application_id: ApplicationId) -> LoanApplication:
        application = await self.application_repository.find_by_id(application_id)
        if not application:
            logfire.warn("Application not found", application_id=application_id)
            raise NotFoundError("Application", str(application_id))
        return application
