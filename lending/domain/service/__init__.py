"""Domain services."""

from .application_service import ApplicationService
from .base import Service
from .contract_service import ContractService
from .counsel_service import CounselService
from .identity_resolver import IdentityResolver
from .judgment_service import JudgmentService
from .jwt_service import JWTService
from .repayment_service import RepaymentService
from .terms_agreement_service import (
    AgreedTerms,
    AgreementStatus,
    TermsAgreementService,
)
from .terms_service import TermsService
from .user_service import UserService

__all__ = [
    "AgreedTerms",
    "AgreementStatus",
    "ApplicationService",
    "ContractService",
    "CounselService",
    "IdentityResolver",
    "JudgmentService",
    "JWTService",
    "RepaymentService",
    "Service",
    "TermsAgreementService",
    "TermsService",
    "UserService",
]
