"""Repayment routes. Creation and listing live under /applications."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from lending.application.usecase.repayment import (
    DeleteRepaymentUseCase,
    GetRepaymentUseCase,
)
from lending.application.usecase.repayment.common import RepaymentResponse
from lending.application.usecase.repayment.delete_repayment import (
    DeleteRepaymentRequest,
    DeleteRepaymentResponse,
)
from lending.application.usecase.repayment.get_repayment import GetRepaymentRequest
from lending.domain.service import JWTService
from lending.interface.api.auth import require_admin

router = APIRouter(prefix="/repayments", tags=["repayments"], route_class=DishkaRoute)


@router.get("/{repayment_id}", response_model=RepaymentResponse)
async def get_repayment(
    repayment_id: int,
    get_repayment_use_case: FromDishka[GetRepaymentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RepaymentResponse:
    """Get a repayment by ID (admin only)."""
    require_admin(jwt_service, auth_token)
    return await get_repayment_use_case.execute(
        GetRepaymentRequest(repayment_id=repayment_id)
    )


@router.delete("/{repayment_id}", response_model=DeleteRepaymentResponse)
async def delete_repayment(
    repayment_id: int,
    delete_repayment_use_case: FromDishka[DeleteRepaymentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteRepaymentResponse:
    """Reverse a repayment, restoring the balance it paid off (admin only)."""
    require_admin(jwt_service, auth_token)
    return await delete_repayment_use_case.execute(
        DeleteRepaymentRequest(repayment_id=repayment_id)
    )
