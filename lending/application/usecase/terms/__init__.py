"""Terms use cases."""

from .agree_to_terms import AgreeToTermsUseCase
from .check_agreements import CheckAgreementsUseCase
from .create_terms import CreateTermsUseCase
from .delete_terms import DeleteTermsUseCase
from .get_agreements import GetAgreementsUseCase
from .get_terms import GetTermsUseCase
from .list_terms import ListTermsUseCase
from .update_terms import UpdateTermsUseCase

__all__ = [
    "AgreeToTermsUseCase",
    "CheckAgreementsUseCase",
    "CreateTermsUseCase",
    "DeleteTermsUseCase",
    "GetAgreementsUseCase",
    "GetTermsUseCase",
    "ListTermsUseCase",
    "UpdateTermsUseCase",
]
