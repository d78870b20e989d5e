"""Repayment and balance use cases."""

from .create_repayment import CreateRepaymentUseCase
from .delete_repayment import DeleteRepaymentUseCase
from .get_balance import GetBalanceUseCase
from .get_repayment import GetRepaymentUseCase
from .list_repayments import ListRepaymentsUseCase

__all__ = [
    "CreateRepaymentUseCase",
    "DeleteRepaymentUseCase",
    "GetBalanceUseCase",
    "GetRepaymentUseCase",
    "ListRepaymentsUseCase",
]
