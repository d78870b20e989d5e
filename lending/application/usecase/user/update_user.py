"""Update user use case."""

from pydantic import BaseModel

from lending.domain.service import UserService
from lending.domain.value import UserId, UserRole, UserStatus

from .common import UserResponse


class UpdateUserRequest(BaseModel):
    """Update user request.

    Omitted fields keep their values. An explicit None clears ``phone``.
    """

    user_id: str
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    role: UserRole | None = None
    status: UserStatus | None = None


class UpdateUserUseCase:
    """Use case for partially updating a user from the admin API."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateUserRequest) -> UserResponse:
        """Execute update user flow.

        Args:
            request: Request with user ID and fields to update

        Returns:
            Updated user

        Raises:
            ValidationError: If name or email is blank or null
            NotFoundError: If no active user has the ID
        """
        changes = request.model_dump(exclude_unset=True, exclude={"user_id"})
        user = await self.user_service.update(UserId(request.user_id), **changes)
        return UserResponse.from_user(user)
