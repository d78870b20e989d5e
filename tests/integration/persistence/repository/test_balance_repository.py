"""Integration tests for the loan workflow repositories.

These tests need a migrated PostgreSQL database at DATABASE__URL and are
skipped when it is not set.
"""

import os

import pytest

from lending.domain.model import Balance, LoanApplication
from lending.domain.model.common import utc_now
from lending.domain.repository import BalanceRepository, LoanApplicationRepository
from lending.domain.value import ApplicationStatus
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("DATABASE__URL"),
    reason="DATABASE__URL not set",
)

integration_env = create_env_fixture(unmock={"persistence"})


async def _open_balance(integration_env, amount: int) -> Balance:
    applications = await integration_env.get(LoanApplicationRepository)
    balances = await integration_env.get(BalanceRepository)
    now = utc_now()
    application = await applications.save(
        LoanApplication(
            application_id=await applications.next_id(),
            name="Jane",
            cell_phone="010",
            email="jane@example.com",
            applied_at=now,
            contracted_at=now,
            status=ApplicationStatus.DISBURSED,
            created_at=now,
            updated_at=now,
        )
    )
    return await balances.save(
        Balance(
            balance_id=await balances.next_id(),
            application_id=application.application_id,
            balance=amount,
            created_at=now,
            updated_at=now,
        )
    )


class TestBalanceRepositoryIntegration:
    """Integration tests for the guarded balance update."""

    @pytest.mark.asyncio
    async def test_adjust_applies_delta(self, integration_env):
        # Arrange
        balances = await integration_env.get(BalanceRepository)
        opened = await _open_balance(integration_env, 1000)

        # Act
        adjusted = await balances.adjust(opened.application_id, -400)

        # Assert
        assert adjusted is not None
        assert adjusted.balance == 600
        stored = await balances.find_by_application(opened.application_id)
        assert stored.balance == 600

    @pytest.mark.asyncio
    async def test_adjust_refuses_overdraw(self, integration_env):
        """Should leave the row untouched when the result would be negative."""
        # Arrange
        balances = await integration_env.get(BalanceRepository)
        opened = await _open_balance(integration_env, 100)

        # Act
        adjusted = await balances.adjust(opened.application_id, -101)

        # Assert
        assert adjusted is None
        stored = await balances.find_by_application(opened.application_id)
        assert stored.balance == 100
