"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from lending.application.usecase.auth import GetCurrentUserUseCase
from lending.application.usecase.auth.get_current_user import GetCurrentUserRequest
from lending.application.usecase.user import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from lending.application.usecase.user.common import UserResponse
from lending.application.usecase.user.create_user import CreateUserRequest
from lending.application.usecase.user.delete_user import (
    DeleteUserRequest,
    DeleteUserResponse,
)
from lending.application.usecase.user.get_user import GetUserRequest
from lending.application.usecase.user.list_users import (
    ListUsersRequest,
    ListUsersResponse,
)
from lending.application.usecase.user.update_user import UpdateUserRequest
from lending.domain.service import JWTService
from lending.domain.value import UserRole, UserStatus
from lending.interface.api.auth import require_admin

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateUserAPIRequest(BaseModel):
    """API request for updating a user."""

    name: str | None = Field(None, max_length=255)
    email: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=50)
    role: UserRole | None = None
    status: UserStatus | None = None


@router.get("/me", response_model=UserResponse)
async def get_me(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UserResponse:
    """Get the authenticated user.

    Responds 401 without a valid token and 404 when the token's user was
    deleted.

    Example:
        GET /users/me
        Cookie: auth_token=...
    """
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=auth_token)
    )


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: CreateUserRequest,
    create_user_use_case: FromDishka[CreateUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UserResponse:
    """Create a user (admin only).

    Example:
        POST /users
        Cookie: auth_token=...

        Request:
        {
            "user_id": "user_1718000000000_a1b2c",
            "name": "Alice",
            "email": "alice@example.com"
        }

        Responds 422 when user_id, name or email is missing and 409 when
        the user ID is taken.
    """
    require_admin(jwt_service, auth_token)
    return await create_user_use_case.execute(request)


@router.get("", response_model=ListUsersResponse)
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
    jwt_service: FromDishka[JWTService],
    include_deleted: bool = False,
    auth_token: str | None = Cookie(default=None),
) -> ListUsersResponse:
    """List users, newest first (admin only)."""
    require_admin(jwt_service, auth_token)
    return await list_users_use_case.execute(
        ListUsersRequest(include_deleted=include_deleted)
    )


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    get_user_use_case: FromDishka[GetUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UserResponse:
    """Get a user by ID (admin only)."""
    require_admin(jwt_service, auth_token)
    return await get_user_use_case.execute(GetUserRequest(user_id=user_id))


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    request: UpdateUserAPIRequest,
    update_user_use_case: FromDishka[UpdateUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UserResponse:
    """Update the supplied fields of a user (admin only).

    Example:
        PATCH /users/user_1718000000000_a1b2c
        Cookie: auth_token=...

        Request:
        {
            "phone": "+1 555 0100",
            "status": "inactive"
        }
    """
    require_admin(jwt_service, auth_token)
    return await update_user_use_case.execute(
        UpdateUserRequest(user_id=user_id, **request.model_dump(exclude_unset=True))
    )


@router.delete("/{user_id}", response_model=DeleteUserResponse)
async def delete_user(
    user_id: str,
    delete_user_use_case: FromDishka[DeleteUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteUserResponse:
    """Soft-delete a user (admin only)."""
    require_admin(jwt_service, auth_token)
    return await delete_user_use_case.execute(DeleteUserRequest(user_id=user_id))
