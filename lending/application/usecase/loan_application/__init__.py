"""Loan application use cases."""

from .contract_application import ContractApplicationUseCase
from .create_application import CreateApplicationUseCase
from .delete_application import DeleteApplicationUseCase
from .get_application import GetApplicationUseCase
from .list_applications import ListApplicationsUseCase
from .update_application import UpdateApplicationUseCase

__all__ = [
    "ContractApplicationUseCase",
    "CreateApplicationUseCase",
    "DeleteApplicationUseCase",
    "GetApplicationUseCase",
    "ListApplicationsUseCase",
    "UpdateApplicationUseCase",
]
