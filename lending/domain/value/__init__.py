"""Domain value objects for the lending service."""

from lending.domain.value.identifiers import (
    AgreementId,
    ApplicationId,
    BalanceId,
    ContractId,
    CounselId,
    JudgmentId,
    RepaymentId,
    TermsId,
    UserId,
    new_user_id,
)
from lending.domain.value.types import (
    ApplicationStatus,
    ContractStatus,
    IdentityAssertion,
    UserRole,
    UserStatus,
)

__all__ = [
    # Identifiers
    "UserId",
    "TermsId",
    "AgreementId",
    "CounselId",
    "ApplicationId",
    "JudgmentId",
    "ContractId",
    "RepaymentId",
    "BalanceId",
    "new_user_id",
    # Types
    "ApplicationStatus",
    "ContractStatus",
    "IdentityAssertion",
    "UserRole",
    "UserStatus",
]
