"""Contract domain service."""

from datetime import datetime

import logfire

from lending.domain.error import ConflictError, NotFoundError, ValidationError
from lending.domain.model import Balance, Contract, LoanApplication
from lending.domain.model.common import utc_now
from lending.domain.repository import (
    BalanceRepository,
    ContractRepository,
    JudgmentRepository,
    LoanApplicationRepository,
)
from lending.domain.value import (
    ApplicationId,
    ApplicationStatus,
    ContractId,
    ContractStatus,
    JudgmentId,
)

from .base import Service

# Status moves a contract may make; completed and cancelled are final
TRANSITIONS: dict[ContractStatus, set[ContractStatus]] = {
    ContractStatus.PENDING: {ContractStatus.SIGNED, ContractStatus.CANCELLED},
    ContractStatus.SIGNED: {ContractStatus.ACTIVE, ContractStatus.CANCELLED},
    ContractStatus.ACTIVE: {ContractStatus.COMPLETED},
    ContractStatus.COMPLETED: set(),
    ContractStatus.CANCELLED: set(),
}


class ContractService(Service):
    """Domain service for loan contracts.

    Activating a contract disburses the loan: the application becomes
    disbursed and its balance opens at the contract amount.
    """

    def __init__(
        self,
        contract_repository: ContractRepository,
        application_repository: LoanApplicationRepository,
        judgment_repository: JudgmentRepository,
        balance_repository: BalanceRepository,
    ) -> None:
        """Initialize contract service.

        Args:
            contract_repository: Contract repository
            application_repository: Loan application repository
            judgment_repository: Judgment repository
            balance_repository: Balance repository
        """
        self.contract_repository = contract_repository
        self.application_repository = application_repository
        self.judgment_repository = judgment_repository
        self.balance_repository = balance_repository

    async def create(
        self,
        application_id: ApplicationId,
        judgment_id: JudgmentId,
        amount: int,
        interest_rate: float,
        term: int,
    ) -> Contract:
        """Draw up a contract from an approving judgment.

        Args:
            application_id: Application the contract is for
            judgment_id: Judgment of that application
            amount: Principal, at most the approved amount
            interest_rate: Annual rate, percent
            term: Length in months

        Returns:
            Created contract, pending signature

        Raises:
            ValidationError: If the figures are out of range, or the
                judgment belongs to another application or rejected it
            NotFoundError: If the application or judgment does not exist
            ConflictError: If the application already has a contract
        """
        if amount <= 0:
            raise ValidationError("Contract amount must be greater than 0")
        if interest_rate < 0:
            raise ValidationError("Interest rate cannot be negative")
        if term <= 0:
            raise ValidationError("Contract term must be at least one month")

        with logfire.span(
            "contract_service.create",
            application_id=application_id,
            judgment_id=judgment_id,
        ):
            if not await self.application_repository.find_by_id(application_id):
                raise NotFoundError("Application", str(application_id))
            judgment = await self.judgment_repository.find_by_id(judgment_id)
            if not judgment:
                raise NotFoundError("Judgment", str(judgment_id))
            if judgment.application_id != application_id:
                raise ValidationError(
                    f"Judgment {judgment_id} is not for application {application_id}"
                )
            if not judgment.is_approval:
                raise ValidationError("Application was rejected")
            if amount > judgment.approval_amount:
                raise ValidationError(
                    f"Contract amount exceeds the approved {judgment.approval_amount}"
                )
            if await self.contract_repository.find_by_application(application_id):
                logfire.warn("Contract already exists", application_id=application_id)
                raise ConflictError("Contract", f"application {application_id}")

            now = utc_now()
            contract = Contract(
                contract_id=await self.contract_repository.next_id(),
                application_id=application_id,
                judgment_id=judgment_id,
                amount=amount,
                interest_rate=interest_rate,
                term=term,
                created_at=now,
                updated_at=now,
            )
            saved = await self.contract_repository.save(contract)
            logfire.info(
                "Contract created",
                contract_id=saved.contract_id,
                application_id=application_id,
                amount=amount,
            )
            return saved

    async def list_contracts(self) -> list[Contract]:
        """List active contracts, newest first."""
        with logfire.span("contract_service.list_contracts"):
            return await self.contract_repository.find_all()

    async def get(self, contract_id: ContractId) -> Contract:
        """Get an active contract.

        Raises:
            NotFoundError: If it does not exist or was deleted
        """
        contract = await self.contract_repository.find_by_id(contract_id)
        if not contract:
            logfire.warn("Contract not found", contract_id=contract_id)
            raise NotFoundError("Contract", str(contract_id))
        return contract

    async def update_status(
        self,
        contract_id: ContractId,
        status: ContractStatus,
        signed_at: datetime | None = None,
        activated_at: datetime | None = None,
    ) -> Contract:
        """Move a contract to its next status.

        Signing stamps ``signed_at`` and activation stamps
        ``activated_at``, defaulting to now. Activation also contracts the
        application if needed, marks it disbursed and opens its balance.

        Raises:
            ValidationError: If the move is not allowed from the current status
            NotFoundError: If the contract or its application does not exist
        """
        with logfire.span(
            "contract_service.update_status",
            contract_id=contract_id,
            status=status.value,
        ):
            contract = await self.get(contract_id)
            if status not in TRANSITIONS[contract.status]:
                raise ValidationError(
                    f"Contract cannot move from {contract.status.value} to {status.value}"
                )

            application = None
            if status == ContractStatus.ACTIVE:
                application = await self.application_repository.find_by_id(
                    contract.application_id
                )
                if not application:
                    raise NotFoundError("Application", str(contract.application_id))

            now = utc_now()
            updates: dict = {"status": status, "updated_at": now}
            if status == ContractStatus.SIGNED:
                updates["signed_at"] = signed_at or now
            elif status == ContractStatus.ACTIVE:
                updates["activated_at"] = activated_at or now

            saved = await self.contract_repository.save(
                contract.model_copy(update=updates)
            )
            if application:
                await self._disburse(saved, application)

            logfire.info(
                "Contract status changed",
                contract_id=contract_id,
                from_status=contract.status.value,
                to_status=status.value,
            )
            return saved

    async def delete(self, contract_id: ContractId) -> None:
        """Soft-delete a contract that never disbursed.

        Raises:
            ValidationError: If the contract is active or completed
            NotFoundError: If it does not exist or was already deleted
        """
        with logfire.span("contract_service.delete", contract_id=contract_id):
            contract = await self.get(contract_id)
            if contract.status in (ContractStatus.ACTIVE, ContractStatus.COMPLETED):
                raise ValidationError(
                    f"Cannot delete a contract that is {contract.status.value}"
                )
            await self.contract_repository.save(
                contract.model_copy(
                    update={"is_deleted": True, "updated_at": utc_now()}
                )
            )
            logfire.info("Contract deleted", contract_id=contract_id)

    async def _disburse(
        self, contract: Contract, application: LoanApplication
    ) -> None:
        await self.application_repository.save(
            application.model_copy(
                update={
                    "status": ApplicationStatus.DISBURSED,
                    "contracted_at": application.contracted_at or contract.activated_at,
                    "approval_amount": application.approval_amount or contract.amount,
                    "updated_at": utc_now(),
                }
            )
        )

        if await self.balance_repository.find_by_application(contract.application_id):
            logfire.warn(
                "Balance already open, keeping it",
                application_id=contract.application_id,
            )
            return
        now = utc_now()
        await self.balance_repository.save(
            Balance(
                balance_id=await self.balance_repository.next_id(),
                application_id=contract.application_id,
                balance=contract.amount,
                created_at=now,
                updated_at=now,
            )
        )
        logfire.info(
            "Loan disbursed",
            application_id=contract.application_id,
            balance=contract.amount,
        )
