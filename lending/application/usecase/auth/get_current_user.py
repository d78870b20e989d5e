"""Get current user use case."""

from pydantic import BaseModel

from lending.application.usecase.user.common import UserResponse
from lending.domain.error import NotFoundError
from lending.domain.service import JWTService, UserService
from lending.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserResponse:
        """Execute get current user flow.

        Args:
            request: Request with JWT token

        Returns:
            The token's user

        Raises:
            JWTError: If token is invalid or expired
            NotFoundError: If the user no longer exists or was deleted
        """
        payload = self.jwt_service.verify_token(request.token)

        user = await self.user_service.get_by_id(UserId(payload.user_id))
        if not user:
            raise NotFoundError("User", payload.user_id)

        return UserResponse.from_user(user)
