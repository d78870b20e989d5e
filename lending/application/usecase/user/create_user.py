"""Create user use case."""

from pydantic import BaseModel

from lending.domain.service import UserService
from lending.domain.value import UserRole, UserStatus

from .common import UserResponse


class CreateUserRequest(BaseModel):
    """Create user request.

    Required fields are checked by the user service so that blank values
    fail the same way as missing ones.
    """

    user_id: str = ""
    name: str = ""
    email: str = ""
    phone: str | None = None
    role: UserRole = UserRole.USER
    status: UserStatus = UserStatus.ACTIVE
    external_provider_id: str | None = None


class CreateUserUseCase:
    """Use case for creating a user from the admin API."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize create user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: CreateUserRequest) -> UserResponse:
        """Execute create user flow.

        Args:
            request: Create user request

        Returns:
            Created user

        Raises:
            ValidationError: If user ID, name or email is missing
            ConflictError: If the user ID is taken
        """
        user = await self.user_service.create(
            user_id=request.user_id,
            name=request.name,
            email=request.email,
            phone=request.phone,
            role=request.role,
            status=request.status,
            external_provider_id=request.external_provider_id,
        )
        return UserResponse.from_user(user)
