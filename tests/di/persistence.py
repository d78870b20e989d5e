"""Mock persistence providers for testing."""

from dishka import Scope, provide

from lending.domain.repository import (
    BalanceRepository,
    ContractRepository,
    CounselRepository,
    JudgmentRepository,
    LoanApplicationRepository,
    RepaymentRepository,
    TermsAgreementRepository,
    TermsRepository,
    UserRepository,
)
from lending.persistence.repository.inmemory import (
    InMemoryBalanceRepository,
    InMemoryContractRepository,
    InMemoryCounselRepository,
    InMemoryJudgmentRepository,
    InMemoryLoanApplicationRepository,
    InMemoryRepaymentRepository,
    InMemoryTermsAgreementRepository,
    InMemoryTermsRepository,
    InMemoryUserRepository,
)
from lending.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so that state survives across requests made
    against one container. Each test builds its own container, which keeps
    tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_terms_repository(self) -> TermsRepository:
        """Provide in-memory terms repository."""
        return InMemoryTermsRepository()

    @provide(scope=Scope.APP)
    def get_terms_agreement_repository(self) -> TermsAgreementRepository:
        """Provide in-memory terms agreement repository."""
        return InMemoryTermsAgreementRepository()

    @provide(scope=Scope.APP)
    def get_counsel_repository(self) -> CounselRepository:
        """Provide in-memory counsel repository."""
        return InMemoryCounselRepository()

    @provide(scope=Scope.APP)
    def get_application_repository(self) -> LoanApplicationRepository:
        """Provide in-memory loan application repository."""
        return InMemoryLoanApplicationRepository()

    @provide(scope=Scope.APP)
    def get_judgment_repository(self) -> JudgmentRepository:
        """Provide in-memory judgment repository."""
        return InMemoryJudgmentRepository()

    @provide(scope=Scope.APP)
    def get_contract_repository(self) -> ContractRepository:
        """Provide in-memory contract repository."""
        return InMemoryContractRepository()

    @provide(scope=Scope.APP)
    def get_repayment_repository(self) -> RepaymentRepository:
        """Provide in-memory repayment repository."""
        return InMemoryRepaymentRepository()

    @provide(scope=Scope.APP)
    def get_balance_repository(self) -> BalanceRepository:
        """Provide in-memory balance repository."""
        return InMemoryBalanceRepository()
