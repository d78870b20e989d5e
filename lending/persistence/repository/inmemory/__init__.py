"""In-memory repository implementations for testing."""

from .contract import InMemoryContractRepository
from .counsel import InMemoryCounselRepository
from .judgment import InMemoryJudgmentRepository
from .loan_application import InMemoryLoanApplicationRepository
from .repayment import InMemoryBalanceRepository, InMemoryRepaymentRepository
from .terms import InMemoryTermsRepository
from .terms_agreement import InMemoryTermsAgreementRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryBalanceRepository",
    "InMemoryContractRepository",
    "InMemoryCounselRepository",
    "InMemoryJudgmentRepository",
    "InMemoryLoanApplicationRepository",
    "InMemoryRepaymentRepository",
    "InMemoryTermsRepository",
    "InMemoryTermsAgreementRepository",
    "InMemoryUserRepository",
]
