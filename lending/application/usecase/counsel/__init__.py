"""Counsel use cases."""

from .create_counsel import CreateCounselUseCase
from .delete_counsel import DeleteCounselUseCase
from .get_counsel import GetCounselUseCase
from .list_counsels import ListCounselsUseCase
from .update_counsel import UpdateCounselUseCase

__all__ = [
    "CreateCounselUseCase",
    "DeleteCounselUseCase",
    "GetCounselUseCase",
    "ListCounselsUseCase",
    "UpdateCounselUseCase",
]
