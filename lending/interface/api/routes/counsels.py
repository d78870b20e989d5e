"""Counsel request routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from lending.application.usecase.counsel import (
    CreateCounselUseCase,
    DeleteCounselUseCase,
    GetCounselUseCase,
    ListCounselsUseCase,
    UpdateCounselUseCase,
)
from lending.application.usecase.counsel.common import CounselResponse
from lending.application.usecase.counsel.create_counsel import CreateCounselRequest
from lending.application.usecase.counsel.delete_counsel import (
    DeleteCounselRequest,
    DeleteCounselResponse,
)
from lending.application.usecase.counsel.get_counsel import GetCounselRequest
from lending.application.usecase.counsel.list_counsels import ListCounselsResponse
from lending.application.usecase.counsel.update_counsel import UpdateCounselRequest
from lending.domain.service import JWTService
from lending.interface.api.auth import require_admin

router = APIRouter(prefix="/counsels", tags=["counsels"], route_class=DishkaRoute)


class UpdateCounselAPIRequest(BaseModel):
    """API request for updating a counsel request."""

    name: str | None = None
    cell_phone: str | None = None
    email: str | None = None
    memo: str | None = None
    address: str | None = None
    address_detail: str | None = None
    zip_code: str | None = None


@router.post("", response_model=CounselResponse, status_code=status.HTTP_201_CREATED)
async def create_counsel(
    request: CreateCounselRequest,
    create_counsel_use_case: FromDishka[CreateCounselUseCase],
) -> CounselResponse:
    """Submit a counsel request. Open to anonymous visitors.

    Example:
        POST /counsels

        Request:
        {
            "name": "Jane Doe",
            "cell_phone": "010-1111-2222",
            "email": "jane@example.com",
            "message": "I'd like to talk about a loan",
            "counsel_date_time": "2026-05-01T10:00:00Z"
        }
    """
    return await create_counsel_use_case.execute(request)


@router.get("", response_model=ListCounselsResponse)
async def list_counsels(
    list_counsels_use_case: FromDishka[ListCounselsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListCounselsResponse:
    """List active counsel requests, most recent first (admin only)."""
    require_admin(jwt_service, auth_token)
    return await list_counsels_use_case.execute()


@router.get("/{counsel_id}", response_model=CounselResponse)
async def get_counsel(
    counsel_id: int,
    get_counsel_use_case: FromDishka[GetCounselUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CounselResponse:
    """Get a counsel request by ID (admin only)."""
    require_admin(jwt_service, auth_token)
    return await get_counsel_use_case.execute(GetCounselRequest(counsel_id=counsel_id))


@router.patch("/{counsel_id}", response_model=CounselResponse)
async def update_counsel(
    counsel_id: int,
    request: UpdateCounselAPIRequest,
    update_counsel_use_case: FromDishka[UpdateCounselUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CounselResponse:
    """Update the supplied fields of a counsel request (admin only).

    An explicit null clears memo or the address fields.
    """
    require_admin(jwt_service, auth_token)
    return await update_counsel_use_case.execute(
        UpdateCounselRequest(
            counsel_id=counsel_id, **request.model_dump(exclude_unset=True)
        )
    )


@router.delete("/{counsel_id}", response_model=DeleteCounselResponse)
async def delete_counsel(
    counsel_id: int,
    delete_counsel_use_case: FromDishka[DeleteCounselUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCounselResponse:
    """Soft-delete a counsel request (admin only)."""
    require_admin(jwt_service, auth_token)
    return await delete_counsel_use_case.execute(
        DeleteCounselRequest(counsel_id=counsel_id)
    )
