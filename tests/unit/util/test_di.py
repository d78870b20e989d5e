"""Unit tests for provider selection."""

import pytest

from lending.application.usecase.contract import UpdateContractUseCase
from lending.application.usecase.counsel import CreateCounselUseCase
from lending.application.usecase.judgment import UpdateJudgmentUseCase
from lending.application.usecase.loan_application import ContractApplicationUseCase
from lending.application.usecase.repayment import (
    CreateRepaymentUseCase,
    GetBalanceUseCase,
)
from lending.util.di import get_provider
from lending.util.di.core import ProdConfigProvider
from lending.util.di.infrastructure import PersistenceProvider
from lending.util.di.infrastructure.persistence import ProdPersistenceProvider
from tests.di import MockPersistenceProvider, build_test_container


def test_concrete_provider_used_as_is():
    """Providers without implementations are returned unchanged."""
    assert get_provider(ProdConfigProvider) is ProdConfigProvider


def test_component_implementations():
    """Swappable components resolve by the mock flag."""
    assert get_provider(PersistenceProvider) is ProdPersistenceProvider
    assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider


def test_unknown_component_rejected():
    """Should reject unmocking a component that does not exist."""
    with pytest.raises(ValueError, match="Unknown components"):
        build_test_container(unmock={"cache"})  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_loan_workflow_use_cases_resolve():
    """Every loan workflow use case should be buildable from the container."""
    container = build_test_container()

    async with container() as request_container:
        for use_case in (
            CreateCounselUseCase,
            ContractApplicationUseCase,
            UpdateJudgmentUseCase,
            UpdateContractUseCase,
            CreateRepaymentUseCase,
            GetBalanceUseCase,
        ):
            assert isinstance(await request_container.get(use_case), use_case)

    await container.close()
