"""Get user use case."""

from pydantic import BaseModel

from lending.domain.error import NotFoundError
from lending.domain.service import UserService
from lending.domain.value import UserId

from .common import UserResponse


class GetUserRequest(BaseModel):
    """Get user request."""

    user_id: str


class GetUserUseCase:
    """Use case for getting an active user by ID."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> UserResponse:
        """Execute get user flow.

        Raises:
            NotFoundError: If no active user has the ID
        """
        user = await self.user_service.get_by_id(UserId(request.user_id))
        if not user:
            raise NotFoundError("User", request.user_id)
        return UserResponse.from_user(user)
