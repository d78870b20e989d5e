"""Application layer DI providers."""

from dishka import Scope, provide

from lending.application.usecase.auth import GetCurrentUserUseCase, SignInUseCase
from lending.application.usecase.contract import (
    CreateContractUseCase,
    DeleteContractUseCase,
    GetContractUseCase,
    ListContractsUseCase,
    UpdateContractUseCase,
)
from lending.application.usecase.counsel import (
    CreateCounselUseCase,
    DeleteCounselUseCase,
    GetCounselUseCase,
    ListCounselsUseCase,
    UpdateCounselUseCase,
)
from lending.application.usecase.judgment import (
    CreateJudgmentUseCase,
    DeleteJudgmentUseCase,
    GetJudgmentUseCase,
    ListJudgmentsUseCase,
    UpdateJudgmentUseCase,
)
from lending.application.usecase.loan_application import (
    ContractApplicationUseCase,
    CreateApplicationUseCase,
    DeleteApplicationUseCase,
    GetApplicationUseCase,
    ListApplicationsUseCase,
    UpdateApplicationUseCase,
)
from lending.application.usecase.repayment import (
    CreateRepaymentUseCase,
    DeleteRepaymentUseCase,
    GetBalanceUseCase,
    GetRepaymentUseCase,
    ListRepaymentsUseCase,
)
from lending.application.usecase.terms import (
    AgreeToTermsUseCase,
    CheckAgreementsUseCase,
    CreateTermsUseCase,
    DeleteTermsUseCase,
    GetAgreementsUseCase,
    GetTermsUseCase,
    ListTermsUseCase,
    UpdateTermsUseCase,
)
from lending.application.usecase.user import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
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


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_sign_in_use_case(
        self, identity_resolver: IdentityResolver, jwt_service: JWTService
    ) -> SignInUseCase:
        """Provide sign-in use case."""
        return SignInUseCase(
            identity_resolver=identity_resolver, jwt_service=jwt_service
        )

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_create_user_use_case(self, user_service: UserService) -> CreateUserUseCase:
        """Provide create user use case."""
        return CreateUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_list_users_use_case(self, user_service: UserService) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_user_use_case(self, user_service: UserService) -> UpdateUserUseCase:
        """Provide update user use case."""
        return UpdateUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_user_use_case(self, user_service: UserService) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(user_service=user_service)

    # Terms use cases
    @provide(scope=Scope.REQUEST)
    def get_create_terms_use_case(
        self, terms_service: TermsService
    ) -> CreateTermsUseCase:
        """Provide create terms use case."""
        return CreateTermsUseCase(terms_service=terms_service)

    @provide(scope=Scope.REQUEST)
    def get_list_terms_use_case(self, terms_service: TermsService) -> ListTermsUseCase:
        """Provide list terms use case."""
        return ListTermsUseCase(terms_service=terms_service)

    @provide(scope=Scope.REQUEST)
    def get_get_terms_use_case(self, terms_service: TermsService) -> GetTermsUseCase:
        """Provide get terms use case."""
        return GetTermsUseCase(terms_service=terms_service)

    @provide(scope=Scope.REQUEST)
    def get_update_terms_use_case(
        self, terms_service: TermsService
    ) -> UpdateTermsUseCase:
        """Provide update terms use case."""
        return UpdateTermsUseCase(terms_service=terms_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_terms_use_case(
        self, terms_service: TermsService
    ) -> DeleteTermsUseCase:
        """Provide delete terms use case."""
        return DeleteTermsUseCase(terms_service=terms_service)

    # Terms agreement use cases
    @provide(scope=Scope.REQUEST)
    def get_agree_to_terms_use_case(
        self, agreement_service: TermsAgreementService
    ) -> AgreeToTermsUseCase:
        """Provide agree to terms use case."""
        return AgreeToTermsUseCase(agreement_service=agreement_service)

    @provide(scope=Scope.REQUEST)
    def get_get_agreements_use_case(
        self, agreement_service: TermsAgreementService
    ) -> GetAgreementsUseCase:
        """Provide get agreements use case."""
        return GetAgreementsUseCase(agreement_service=agreement_service)

    @provide(scope=Scope.REQUEST)
    def get_check_agreements_use_case(
        self, agreement_service: TermsAgreementService
    ) -> CheckAgreementsUseCase:
        """Provide check agreements use case."""
        return CheckAgreementsUseCase(agreement_service=agreement_service)

    # Counsel use cases
    @provide(scope=Scope.REQUEST)
    def get_create_counsel_use_case(
        self, counsel_service: CounselService
    ) -> CreateCounselUseCase:
        """Provide create counsel use case."""
        return CreateCounselUseCase(counsel_service=counsel_service)

    @provide(scope=Scope.REQUEST)
    def get_list_counsels_use_case(
        self, counsel_service: CounselService
    ) -> ListCounselsUseCase:
        """Provide list counsels use case."""
        return ListCounselsUseCase(counsel_service=counsel_service)

    @provide(scope=Scope.REQUEST)
    def get_get_counsel_use_case(
        self, counsel_service: CounselService
    ) -> GetCounselUseCase:
        """Provide get counsel use case."""
        return GetCounselUseCase(counsel_service=counsel_service)

    @provide(scope=Scope.REQUEST)
    def get_update_counsel_use_case(
        self, counsel_service: CounselService
    ) -> UpdateCounselUseCase:
        """Provide update counsel use case."""
        return UpdateCounselUseCase(counsel_service=counsel_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_counsel_use_case(
        self, counsel_service: CounselService
    ) -> DeleteCounselUseCase:
        """Provide delete counsel use case."""
        return DeleteCounselUseCase(counsel_service=counsel_service)

    # Loan application use cases
    @provide(scope=Scope.REQUEST)
    def get_create_application_use_case(
        self, application_service: ApplicationService
    ) -> CreateApplicationUseCase:
        """Provide create application use case."""
        return CreateApplicationUseCase(application_service=application_service)

    @provide(scope=Scope.REQUEST)
    def get_list_applications_use_case(
        self, application_service: ApplicationService
    ) -> ListApplicationsUseCase:
        """Provide list applications use case."""
        return ListApplicationsUseCase(application_service=application_service)

    @provide(scope=Scope.REQUEST)
    def get_get_application_use_case(
        self, application_service: ApplicationService
    ) -> GetApplicationUseCase:
        """Provide get application use case."""
        return GetApplicationUseCase(application_service=application_service)

    @provide(scope=Scope.REQUEST)
    def get_update_application_use_case(
        self, application_service: ApplicationService
    ) -> UpdateApplicationUseCase:
        """Provide update application use case."""
        return UpdateApplicationUseCase(application_service=application_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_application_use_case(
        self, application_service: ApplicationService
    ) -> DeleteApplicationUseCase:
        """Provide delete application use case."""
        return DeleteApplicationUseCase(application_service=application_service)

    @provide(scope=Scope.REQUEST)
    def get_contract_application_use_case(
        self, application_service: ApplicationService
    ) -> ContractApplicationUseCase:
        """Provide contract application use case."""
        return ContractApplicationUseCase(application_service=application_service)

    # Judgment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_judgment_use_case(
        self, judgment_service: JudgmentService
    ) -> CreateJudgmentUseCase:
        """Provide create judgment use case."""
        return CreateJudgmentUseCase(judgment_service=judgment_service)

    @provide(scope=Scope.REQUEST)
    def get_list_judgments_use_case(
        self, judgment_service: JudgmentService
    ) -> ListJudgmentsUseCase:
        """Provide list judgments use case."""
        return ListJudgmentsUseCase(judgment_service=judgment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_judgment_use_case(
        self, judgment_service: JudgmentService
    ) -> GetJudgmentUseCase:
        """Provide get judgment use case."""
        return GetJudgmentUseCase(judgment_service=judgment_service)

    @provide(scope=Scope.REQUEST)
    def get_update_judgment_use_case(
        self, judgment_service: JudgmentService
    ) -> UpdateJudgmentUseCase:
        """Provide update judgment use case."""
        return UpdateJudgmentUseCase(judgment_service=judgment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_judgment_use_case(
        self, judgment_service: JudgmentService
    ) -> DeleteJudgmentUseCase:
        """Provide delete judgment use case."""
        return DeleteJudgmentUseCase(judgment_service=judgment_service)

    # Contract use cases
    @provide(scope=Scope.REQUEST)
    def get_create_contract_use_case(
        self, contract_service: ContractService
    ) -> CreateContractUseCase:
        """Provide create contract use case."""
        return CreateContractUseCase(contract_service=contract_service)

    @provide(scope=Scope.REQUEST)
    def get_list_contracts_use_case(
        self, contract_service: ContractService
    ) -> ListContractsUseCase:
        """Provide list contracts use case."""
        return ListContractsUseCase(contract_service=contract_service)

    @provide(scope=Scope.REQUEST)
    def get_get_contract_use_case(
        self, contract_service: ContractService
    ) -> GetContractUseCase:
        """Provide get contract use case."""
        return GetContractUseCase(contract_service=contract_service)

    @provide(scope=Scope.REQUEST)
    def get_update_contract_use_case(
        self, contract_service: ContractService
    ) -> UpdateContractUseCase:
        """Provide update contract use case."""
        return UpdateContractUseCase(contract_service=contract_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_contract_use_case(
        self, contract_service: ContractService
    ) -> DeleteContractUseCase:
        """Provide delete contract use case."""
        return DeleteContractUseCase(contract_service=contract_service)

    # Repayment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_repayment_use_case(
        self, repayment_service: RepaymentService
    ) -> CreateRepaymentUseCase:
        """Provide create repayment use case."""
        return CreateRepaymentUseCase(repayment_service=repayment_service)

    @provide(scope=Scope.REQUEST)
    def get_list_repayments_use_case(
        self, repayment_service: RepaymentService
    ) -> ListRepaymentsUseCase:
        """Provide list repayments use case."""
        return ListRepaymentsUseCase(repayment_service=repayment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_repayment_use_case(
        self, repayment_service: RepaymentService
    ) -> GetRepaymentUseCase:
        """Provide get repayment use case."""
        return GetRepaymentUseCase(repayment_service=repayment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_repayment_use_case(
        self, repayment_service: RepaymentService
    ) -> DeleteRepaymentUseCase:
        """Provide delete repayment use case."""
        return DeleteRepaymentUseCase(repayment_service=repayment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_balance_use_case(
        self, repayment_service: RepaymentService
    ) -> GetBalanceUseCase:
        """Provide get balance use case."""
        return GetBalanceUseCase(repayment_service=repayment_service)
