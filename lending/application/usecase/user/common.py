"""Shared response models for user use cases."""

from datetime import datetime

from pydantic import BaseModel

from lending.domain.model import User
from lending.domain.value import UserRole, UserStatus


class UserResponse(BaseModel):
    """User as returned to API clients."""

    user_id: str
    name: str
    email: str
    phone: str | None
    avatar_url: str | None
    role: UserRole
    status: UserStatus
    email_verified_at: datetime | None
    created_at: datetime
    updated_at: datetime
    is_deleted: bool
    external_provider_id: str | None

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        """Build the response from a domain user."""
        return cls(
            user_id=user.user_id,
            name=user.name,
            email=user.email,
            phone=user.phone,
            avatar_url=user.avatar_url,
            role=user.role,
            status=user.status,
            email_verified_at=user.email_verified_at,
            created_at=user.created_at,
            updated_at=user.updated_at,
            is_deleted=user.is_deleted,
            external_provider_id=user.external_provider_id,
        )
