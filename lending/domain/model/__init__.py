"""Domain model entities for the lending service."""

from lending.domain.model.contract import Contract
from lending.domain.model.counsel import Counsel
from lending.domain.model.judgment import Judgment
from lending.domain.model.loan_application import LoanApplication
from lending.domain.model.repayment import Balance, Repayment
from lending.domain.model.terms import Terms
from lending.domain.model.terms_agreement import TermsAgreement
from lending.domain.model.user import User

__all__ = [
    "User",
    "Terms",
    "TermsAgreement",
    "Counsel",
    "LoanApplication",
    "Judgment",
    "Contract",
    "Repayment",
    "Balance",
]
