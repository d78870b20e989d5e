"""Unit tests for ContractService."""

from datetime import datetime, timezone

import pytest
import pytest_asyncio

from lending.domain.error import ConflictError, NotFoundError, ValidationError
from lending.domain.value import ApplicationStatus, ContractStatus, JudgmentId


@pytest_asyncio.fixture
async def judgment(application_service, judgment_service):
    """An approving judgment for a fresh application."""
    application = await application_service.create("Jane", "010", "j@x.com")
    return await judgment_service.create(
        application.application_id, "Review", 3_000_000, 5.5
    )


async def _draw_up(contract_service, judgment, amount: int = 2_000_000):
    return await contract_service.create(
        judgment.application_id, judgment.judgment_id, amount, 5.5, 24
    )


class TestCreate:
    """Tests for ContractService.create()."""

    @pytest.mark.asyncio
    async def test_starts_pending(self, contract_service, judgment):
        contract = await _draw_up(contract_service, judgment)

        assert contract.status == ContractStatus.PENDING
        assert contract.amount == 2_000_000
        assert contract.term == 24
        assert contract.signed_at is None

    @pytest.mark.asyncio
    async def test_amount_capped_by_approval(self, contract_service, judgment):
        with pytest.raises(ValidationError, match="exceeds the approved"):
            await _draw_up(contract_service, judgment, amount=3_000_001)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "amount,rate,term", [(0, 5.0, 12), (100, -1.0, 12), (100, 5.0, 0)]
    )
    async def test_figures_out_of_range(
        self, contract_service, judgment, amount, rate, term
    ):
        with pytest.raises(ValidationError):
            await contract_service.create(
                judgment.application_id, judgment.judgment_id, amount, rate, term
            )

    @pytest.mark.asyncio
    async def test_second_contract_conflicts(self, contract_service, judgment):
        await _draw_up(contract_service, judgment)

        with pytest.raises(ConflictError, match="Contract"):
            await _draw_up(contract_service, judgment)

    @pytest.mark.asyncio
    async def test_rejecting_judgment(
        self, application_service, judgment_service, contract_service
    ):
        application = await application_service.create("Bob", "010", "b@x.com")
        rejection = await judgment_service.create(
            application.application_id, "Review", 0, 0.0
        )

        with pytest.raises(ValidationError, match="rejected"):
            await _draw_up(contract_service, rejection)

    @pytest.mark.asyncio
    async def test_judgment_of_another_application(
        self, application_service, contract_service, judgment
    ):
        other = await application_service.create("Bob", "010", "b@x.com")

        with pytest.raises(ValidationError, match="is not for application"):
            await contract_service.create(
                other.application_id, judgment.judgment_id, 100, 5.0, 12
            )

    @pytest.mark.asyncio
    async def test_unknown_judgment(self, contract_service, judgment):
        with pytest.raises(NotFoundError, match="Judgment"):
            await contract_service.create(
                judgment.application_id, JudgmentId(999), 100, 5.0, 12
            )


class TestUpdateStatus:
    """Tests for ContractService.update_status()."""

    @pytest.mark.asyncio
    async def test_sign_stamps_signed_at(self, contract_service, judgment):
        contract = await _draw_up(contract_service, judgment)
        signed_at = datetime(2026, 6, 1, tzinfo=timezone.utc)

        signed = await contract_service.update_status(
            contract.contract_id, ContractStatus.SIGNED, signed_at=signed_at
        )

        assert signed.status == ContractStatus.SIGNED
        assert signed.signed_at == signed_at

    @pytest.mark.asyncio
    async def test_activation_disburses(
        self, contract_service, application_service, balance_repository, judgment
    ):
        """Should mark the application disbursed and open its balance."""
        contract = await _draw_up(contract_service, judgment)
        await contract_service.update_status(contract.contract_id, ContractStatus.SIGNED)

        active = await contract_service.update_status(
            contract.contract_id, ContractStatus.ACTIVE
        )

        assert active.activated_at is not None
        application = await application_service.get(judgment.application_id)
        assert application.status == ApplicationStatus.DISBURSED
        assert application.is_contracted is True
        balance = await balance_repository.find_by_application(
            judgment.application_id
        )
        assert balance.balance == 2_000_000

    @pytest.mark.asyncio
    async def test_cannot_skip_signing(self, contract_service, judgment):
        contract = await _draw_up(contract_service, judgment)

        with pytest.raises(ValidationError, match="from pending to active"):
            await contract_service.update_status(
                contract.contract_id, ContractStatus.ACTIVE
            )

    @pytest.mark.asyncio
    async def test_cancelled_is_final(self, contract_service, judgment):
        contract = await _draw_up(contract_service, judgment)
        await contract_service.update_status(
            contract.contract_id, ContractStatus.CANCELLED
        )

        with pytest.raises(ValidationError):
            await contract_service.update_status(
                contract.contract_id, ContractStatus.SIGNED
            )


class TestDelete:
    """Tests for ContractService.delete()."""

    @pytest.mark.asyncio
    async def test_pending_contract_deleted(self, contract_service, judgment):
        contract = await _draw_up(contract_service, judgment)

        await contract_service.delete(contract.contract_id)

        with pytest.raises(NotFoundError):
            await contract_service.get(contract.contract_id)
        assert await contract_service.list_contracts() == []

    @pytest.mark.asyncio
    async def test_active_contract_kept(self, contract_service, judgment):
        contract = await _draw_up(contract_service, judgment)
        await contract_service.update_status(contract.contract_id, ContractStatus.SIGNED)
        await contract_service.update_status(contract.contract_id, ContractStatus.ACTIVE)

        with pytest.raises(ValidationError, match="contract that is active"):
            await contract_service.delete(contract.contract_id)
