"""User aggregate root.

Users are created by an administrator or implicitly on their first
external sign-in, and are only ever soft-deleted.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from lending.domain.model.common import DomainModel, utc_now
from lending.domain.value import UserId, UserRole, UserStatus


class User(DomainModel):
    """User aggregate root.

    ``user_id`` is assigned once and never changes. ``external_provider_id``
    links the record to an OAuth subject and, once set, is never handed to
    a different identity.
    """

    user_id: UserId
    name: str
    email: str
    phone: Optional[str] = None
    external_provider_id: Optional[str] = None
    avatar_url: Optional[str] = None
    email_verified_at: Optional[datetime] = None
    role: UserRole = UserRole.USER
    status: UserStatus = UserStatus.ACTIVE
    is_deleted: bool = False
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
