"""Repository interfaces for the lending domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from lending.domain.repository.contract import ContractRepository
from lending.domain.repository.counsel import CounselRepository
from lending.domain.repository.judgment import JudgmentRepository
from lending.domain.repository.loan_application import LoanApplicationRepository
from lending.domain.repository.repayment import BalanceRepository, RepaymentRepository
from lending.domain.repository.terms import TermsRepository
from lending.domain.repository.terms_agreement import TermsAgreementRepository
from lending.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "TermsRepository",
    "TermsAgreementRepository",
    "CounselRepository",
    "LoanApplicationRepository",
    "JudgmentRepository",
    "ContractRepository",
    "RepaymentRepository",
    "BalanceRepository",
]
