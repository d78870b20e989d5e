"""Loan workflow services wired to shared in-memory repositories."""

import pytest

from lending.domain.service import (
    ApplicationService,
    ContractService,
    JudgmentService,
    RepaymentService,
)
from lending.persistence.repository.inmemory import (
    InMemoryBalanceRepository,
    InMemoryContractRepository,
    InMemoryJudgmentRepository,
    InMemoryLoanApplicationRepository,
    InMemoryRepaymentRepository,
)


@pytest.fixture
def application_repository() -> InMemoryLoanApplicationRepository:
    return InMemoryLoanApplicationRepository()


@pytest.fixture
def judgment_repository() -> InMemoryJudgmentRepository:
    return InMemoryJudgmentRepository()


@pytest.fixture
def balance_repository() -> InMemoryBalanceRepository:
    return InMemoryBalanceRepository()


@pytest.fixture
def application_service(
    application_repository, judgment_repository
) -> ApplicationService:
    return ApplicationService(application_repository, judgment_repository)


@pytest.fixture
def judgment_service(application_repository, judgment_repository) -> JudgmentService:
    return JudgmentService(judgment_repository, application_repository)


@pytest.fixture
def contract_service(
    application_repository, judgment_repository, balance_repository
) -> ContractService:
    return ContractService(
        InMemoryContractRepository(),
        application_repository,
        judgment_repository,
        balance_repository,
    )


@pytest.fixture
def repayment_service(application_repository, balance_repository) -> RepaymentService:
    return RepaymentService(
        InMemoryRepaymentRepository(), balance_repository, application_repository
    )
