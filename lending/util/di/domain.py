"""Domain layer DI providers."""

from dishka import Scope, provide

from lending.config import AuthSettings
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
from lending.domain.service import (
    ApplicationService,
    ContractService,
    CounselService,
    IdentityResolver,
    JudgmentService,
    JWTService,
    RepaymentService,
    TermsAgreementService,
    TermsService,
    UserService,
)
from lending.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_identity_resolver(self, user_repository: UserRepository) -> IdentityResolver:
        """Provide identity resolution domain service."""
        return IdentityResolver(user_repository=user_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_terms_service(self, terms_repository: TermsRepository) -> TermsService:
        """Provide terms domain service."""
        return TermsService(terms_repository=terms_repository)

    @provide
    def get_terms_agreement_service(
        self,
        agreement_repository: TermsAgreementRepository,
        terms_repository: TermsRepository,
    ) -> TermsAgreementService:
        """Provide terms agreement domain service."""
        return TermsAgreementService(
            agreement_repository=agreement_repository,
            terms_repository=terms_repository,
        )

    @provide
    def get_counsel_service(
        self, counsel_repository: CounselRepository
    ) -> CounselService:
        """Provide counsel domain service."""
        return CounselService(counsel_repository=counsel_repository)

    @provide
    def get_application_service(
        self,
        application_repository: LoanApplicationRepository,
        judgment_repository: JudgmentRepository,
    ) -> ApplicationService:
        """Provide loan application domain service."""
        return ApplicationService(
            application_repository=application_repository,
            judgment_repository=judgment_repository,
        )

    @provide
    def get_judgment_service(
        self,
        judgment_repository: JudgmentRepository,
        application_repository: LoanApplicationRepository,
    ) -> JudgmentService:
        """Provide judgment domain service."""
        return JudgmentService(
            judgment_repository=judgment_repository,
            application_repository=application_repository,
        )

    @provide
    def get_contract_service(
        self,
        contract_repository: ContractRepository,
        application_repository: LoanApplicationRepository,
        judgment_repository: JudgmentRepository,
        balance_repository: BalanceRepository,
    ) -> ContractService:
        """Provide contract domain service."""
        return ContractService(
            contract_repository=contract_repository,
            application_repository=application_repository,
            judgment_repository=judgment_repository,
            balance_repository=balance_repository,
        )

    @provide
    def get_repayment_service(
        self,
        repayment_repository: RepaymentRepository,
        balance_repository: BalanceRepository,
        application_repository: LoanApplicationRepository,
    ) -> RepaymentService:
        """Provide repayment domain service."""
        return RepaymentService(
            repayment_repository=repayment_repository,
            balance_repository=balance_repository,
            application_repository=application_repository,
        )
