"""PostgreSQL repository implementations."""

from lending.persistence.repository.contract import PostgresContractRepository
from lending.persistence.repository.counsel import PostgresCounselRepository
from lending.persistence.repository.judgment import PostgresJudgmentRepository
from lending.persistence.repository.loan_application import (
    PostgresLoanApplicationRepository,
)
from lending.persistence.repository.repayment import (
    PostgresBalanceRepository,
    PostgresRepaymentRepository,
)
from lending.persistence.repository.terms import PostgresTermsRepository
from lending.persistence.repository.terms_agreement import (
    PostgresTermsAgreementRepository,
)
from lending.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresTermsRepository",
    "PostgresTermsAgreementRepository",
    "PostgresCounselRepository",
    "PostgresLoanApplicationRepository",
    "PostgresJudgmentRepository",
    "PostgresContractRepository",
    "PostgresRepaymentRepository",
    "PostgresBalanceRepository",
]
