"""List users use case."""

import logfire
from pydantic import BaseModel

from lending.domain.service import UserService

from .common import UserResponse


class ListUsersRequest(BaseModel):
    """List users request."""

    include_deleted: bool = False


class ListUsersResponse(BaseModel):
    """List users response."""

    users: list[UserResponse]


class ListUsersUseCase:
    """Use case for listing users, newest first."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize list users use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        """Execute list users flow."""
        with logfire.span(
            "list_users.execute", include_deleted=request.include_deleted
        ):
            users = await self.user_service.list_users(
                include_deleted=request.include_deleted
            )
            return ListUsersResponse(
                users=[UserResponse.from_user(user) for user in users]
            )
