"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from lending.config import Settings
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
from lending.persistence.database import create_engine, create_session_factory
from lending.persistence.repository import (
    PostgresBalanceRepository,
    PostgresContractRepository,
    PostgresCounselRepository,
    PostgresJudgmentRepository,
    PostgresLoanApplicationRepository,
    PostgresRepaymentRepository,
    PostgresTermsAgreementRepository,
    PostgresTermsRepository,
    PostgresUserRepository,
)
from lending.util.di.base import ProviderBase
from lending.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide the engine, disposed when the container closes."""
        engine = create_engine(settings.database, echo=settings.debug)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Commits when the request scope closes cleanly and rolls back when
        it closes with an error.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn(
                    "Request transaction rolled back", error_type=type(e).__name__
                )
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_terms_repository(self, session: AsyncSession) -> TermsRepository:
        """Provide Terms repository."""
        return PostgresTermsRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_terms_agreement_repository(
        self, session: AsyncSession
    ) -> TermsAgreementRepository:
        """Provide TermsAgreement repository."""
        return PostgresTermsAgreementRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_counsel_repository(self, session: AsyncSession) -> CounselRepository:
        """Provide Counsel repository."""
        return PostgresCounselRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_application_repository(
        self, session: AsyncSession
    ) -> LoanApplicationRepository:
        """Provide LoanApplication repository."""
        return PostgresLoanApplicationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_judgment_repository(self, session: AsyncSession) -> JudgmentRepository:
        """Provide Judgment repository."""
        return PostgresJudgmentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_contract_repository(self, session: AsyncSession) -> ContractRepository:
        """Provide Contract repository."""
        return PostgresContractRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_repayment_repository(self, session: AsyncSession) -> RepaymentRepository:
        """Provide Repayment repository."""
        return PostgresRepaymentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_balance_repository(self, session: AsyncSession) -> BalanceRepository:
        """Provide Balance repository."""
        return PostgresBalanceRepository(session)
