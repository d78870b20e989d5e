"""Delete user use case."""

from pydantic import BaseModel

from lending.domain.service import UserService
from lending.domain.value import UserId


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    user_id: str


class DeleteUserResponse(BaseModel):
    """Delete user response."""

    user_id: str
    deleted: bool


class DeleteUserUseCase:
    """Use case for soft-deleting a user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize delete user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: DeleteUserRequest) -> DeleteUserResponse:
        """Execute delete user flow.

        Raises:
            NotFoundError: If no active user has the ID
        """
        await self.user_service.soft_delete(UserId(request.user_id))
        return DeleteUserResponse(user_id=request.user_id, deleted=True)
