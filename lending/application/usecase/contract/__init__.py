"""Contract use cases."""

from .create_contract import CreateContractUseCase
from .delete_contract import DeleteContractUseCase
from .get_contract import GetContractUseCase
from .list_contracts import ListContractsUseCase
from .update_contract import UpdateContractUseCase

__all__ = [
    "CreateContractUseCase",
    "DeleteContractUseCase",
    "GetContractUseCase",
    "ListContractsUseCase",
    "UpdateContractUseCase",
]
