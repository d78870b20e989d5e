"""Domain value objects for the lending service.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class UserRole(str, Enum):
    """Role of a user. New users are always plain users."""

    USER = "user"
    ADMIN = "admin"


class UserStatus(str, Enum):
    """Account status of a user."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class IdentityAssertion(BaseModel):
    """Attributes an identity provider vouches for after a successful sign-in.

    The email is treated as verified: the provider only returns it once the
    user has proven ownership.
    """

    model_config = ConfigDict(frozen=True)

    external_provider_id: str  # Permanent subject ID from the provider
    email: str
    display_name: str | None = None
    avatar_url: str | None = None


class ApplicationStatus(str, Enum):
    """Where a loan application is in the lending workflow.

    pending -> approved | rejected (judgment) -> contracted -> disbursed
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    CONTRACTED = "contracted"
    DISBURSED = "disbursed"


class ContractStatus(str, Enum):
    """Lifecycle status of a loan contract."""

    PENDING = "pending"
    SIGNED = "signed"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
