"""Judgment use cases."""

from .create_judgment import CreateJudgmentUseCase
from .delete_judgment import DeleteJudgmentUseCase
from .get_judgment import GetJudgmentUseCase
from .list_judgments import ListJudgmentsUseCase
from .update_judgment import UpdateJudgmentUseCase

__all__ = [
    "CreateJudgmentUseCase",
    "DeleteJudgmentUseCase",
    "GetJudgmentUseCase",
    "ListJudgmentsUseCase",
    "UpdateJudgmentUseCase",
]
