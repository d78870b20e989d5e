"""Judgment routes. All admin only."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from lending.application.usecase.judgment import (
    CreateJudgmentUseCase,
    DeleteJudgmentUseCase,
    GetJudgmentUseCase,
    ListJudgmentsUseCase,
    UpdateJudgmentUseCase,
)
from lending.application.usecase.judgment.common import JudgmentResponse
from lending.application.usecase.judgment.create_judgment import (
    CreateJudgmentRequest,
)
from lending.application.usecase.judgment.delete_judgment import (
    DeleteJudgmentRequest,
    DeleteJudgmentResponse,
)
from lending.application.usecase.judgment.get_judgment import GetJudgmentRequest
from lending.application.usecase.judgment.list_judgments import (
    ListJudgmentsResponse,
)
from lending.application.usecase.judgment.update_judgment import (
    UpdateJudgmentRequest,
)
from lending.domain.service import JWTService
from lending.interface.api.auth import require_admin

router = APIRouter(prefix="/judgments", tags=["judgments"], route_class=DishkaRoute)


class UpdateJudgmentAPIRequest(BaseModel):
    """API request for revising a judgment."""

    name: str | None = None
    approval_amount: int | None = None
    approval_interest_rate: float | None = None
    reason: str | None = None


@router.post("", response_model=JudgmentResponse, status_code=status.HTTP_201_CREATED)
async def create_judgment(
    request: CreateJudgmentRequest,
    create_judgment_use_case: FromDishka[CreateJudgmentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> JudgmentResponse:
    """Judge an application.

    Example:
        POST /judgments

        Request:
        {
            "application_id": 7,
            "name": "Credit review",
            "approval_amount": 3000000,
            "approval_interest_rate": 5.5
        }

        A zero approval_amount rejects the application. Responds 409 when
        the application already has a judgment.
    """
    require_admin(jwt_service, auth_token)
    return await create_judgment_use_case.execute(request)


@router.get("", response_model=ListJudgmentsResponse)
async def list_judgments(
    list_judgments_use_case: FromDishka[ListJudgmentsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListJudgmentsResponse:
    """List active judgments, newest first."""
    require_admin(jwt_service, auth_token)
    return await list_judgments_use_case.execute()


@router.get("/{judgment_id}", response_model=JudgmentResponse)
async def get_judgment(
    judgment_id: int,
    get_judgment_use_case: FromDishka[GetJudgmentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> JudgmentResponse:
    """Get a judgment by ID."""
    require_admin(jwt_service, auth_token)
    return await get_judgment_use_case.execute(
        GetJudgmentRequest(judgment_id=judgment_id)
    )


@router.patch("/{judgment_id}", response_model=JudgmentResponse)
async def update_judgment(
    judgment_id: int,
    request: UpdateJudgmentAPIRequest,
    update_judgment_use_case: FromDishka[UpdateJudgmentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> JudgmentResponse:
    """Revise a judgment; the application status follows the new amount."""
    require_admin(jwt_service, auth_token)
    return await update_judgment_use_case.execute(
        UpdateJudgmentRequest(
            judgment_id=judgment_id, **request.model_dump(exclude_unset=True)
        )
    )


@router.delete("/{judgment_id}", response_model=DeleteJudgmentResponse)
async def delete_judgment(
    judgment_id: int,
    delete_judgment_use_case: FromDishka[DeleteJudgmentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteJudgmentResponse:
    """Withdraw a judgment, returning the application to pending."""
    require_admin(jwt_service, auth_token)
    return await delete_judgment_use_case.execute(
        DeleteJudgmentRequest(judgment_id=judgment_id)
    )
