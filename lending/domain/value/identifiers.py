"""Strongly typed identifiers for lending domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

import secrets
import string
import time
from typing import NewType

UserId = NewType("UserId", str)
TermsId = NewType("TermsId", int)
AgreementId = NewType("AgreementId", int)
CounselId = NewType("CounselId", int)
ApplicationId = NewType("ApplicationId", int)
JudgmentId = NewType("JudgmentId", int)
ContractId = NewType("ContractId", int)
RepaymentId = NewType("RepaymentId", int)
BalanceId = NewType("BalanceId", int)

_BASE36 = string.digits + string.ascii_lowercase


def new_user_id() -> UserId:
    """Generate a fresh user ID.

    Format: ``user_<epoch millis>_<5 base36 chars>``. The time prefix keeps
    IDs roughly sortable by creation, the suffix separates users created in
    the same millisecond.
    """
    suffix = "".join(secrets.choice(_BASE36) for _ in range(5))
    return UserId(f"user_{time.time_ns() // 1_000_000}_{suffix}")
