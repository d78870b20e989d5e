"""Unit tests for RepaymentService."""

import pytest
import pytest_asyncio

from lending.domain.error import NotFoundError, ValidationError
from lending.domain.value import ApplicationId, ContractStatus


@pytest_asyncio.fixture
async def loan(application_service, judgment_service, contract_service):
    """A disbursed loan of 1,000,000."""
    application = await application_service.create("Jane", "010", "j@x.com")
    judgment = await judgment_service.create(
        application.application_id, "Review", 1_000_000, 4.0
    )
    contract = await contract_service.create(
        application.application_id, judgment.judgment_id, 1_000_000, 4.0, 12
    )
    await contract_service.update_status(contract.contract_id, ContractStatus.SIGNED)
    await contract_service.update_status(contract.contract_id, ContractStatus.ACTIVE)
    return application


class TestRepay:
    """Tests for RepaymentService.repay()."""

    @pytest.mark.asyncio
    async def test_lowers_balance(self, repayment_service, loan):
        repayment = await repayment_service.repay(loan.application_id, 250_000)

        assert repayment.repayment_amount == 250_000
        balance = await repayment_service.get_balance(loan.application_id)
        assert balance.balance == 750_000

    @pytest.mark.asyncio
    async def test_full_payoff_reaches_zero(self, repayment_service, loan):
        await repayment_service.repay(loan.application_id, 1_000_000)

        balance = await repayment_service.get_balance(loan.application_id)
        assert balance.balance == 0

    @pytest.mark.asyncio
    async def test_insufficient_balance(self, repayment_service, loan):
        """Should leave the balance untouched when the amount exceeds it."""
        with pytest.raises(ValidationError, match="Insufficient balance"):
            await repayment_service.repay(loan.application_id, 1_000_001)

        balance = await repayment_service.get_balance(loan.application_id)
        assert balance.balance == 1_000_000
        assert await repayment_service.list_for_application(loan.application_id) == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", [0, -10])
    async def test_amount_must_be_positive(self, repayment_service, loan, amount):
        with pytest.raises(ValidationError, match="greater than 0"):
            await repayment_service.repay(loan.application_id, amount)

    @pytest.mark.asyncio
    async def test_application_not_contracted(
        self, repayment_service, application_service
    ):
        application = await application_service.create("Bob", "010", "b@x.com")

        with pytest.raises(ValidationError, match="not been contracted"):
            await repayment_service.repay(application.application_id, 10)

    @pytest.mark.asyncio
    async def test_contracted_without_balance(
        self, repayment_service, application_service, judgment_service
    ):
        """Should refuse when the contract was never activated."""
        application = await application_service.create("Bob", "010", "b@x.com")
        await judgment_service.create(application.application_id, "Review", 500, 1.0)
        await application_service.contract(application.application_id)

        with pytest.raises(ValidationError, match="No balance found"):
            await repayment_service.repay(application.application_id, 10)

    @pytest.mark.asyncio
    async def test_unknown_application(self, repayment_service):
        with pytest.raises(NotFoundError):
            await repayment_service.repay(ApplicationId(404), 10)


@pytest.mark.asyncio
async def test_list_newest_first(repayment_service, loan):
    first = await repayment_service.repay(loan.application_id, 100)
    second = await repayment_service.repay(loan.application_id, 200)

    repayments = await repayment_service.list_for_application(loan.application_id)

    assert [r.repayment_id for r in repayments] == [
        second.repayment_id,
        first.repayment_id,
    ]


@pytest.mark.asyncio
async def test_delete_restores_balance(repayment_service, loan):
    repayment = await repayment_service.repay(loan.application_id, 300_000)

    await repayment_service.delete(repayment.repayment_id)

    balance = await repayment_service.get_balance(loan.application_id)
    assert balance.balance == 1_000_000
    with pytest.raises(NotFoundError):
        await repayment_service.get(repayment.repayment_id)


@pytest.mark.asyncio
async def test_balance_missing_before_disbursement(
    repayment_service, application_service
):
    application = await application_service.create("Bob", "010", "b@x.com")

    with pytest.raises(NotFoundError, match="Balance"):
        await repayment_service.get_balance(application.application_id)
