"""Identity resolution for external sign-in."""

import logfire

from lending.domain.error import ValidationError
from lending.domain.model import User
from lending.domain.model.common import utc_now
from lending.domain.repository import UserRepository
from lending.domain.value import (
    IdentityAssertion,
    UserRole,
    UserStatus,
    new_user_id,
)

from .base import Service


class IdentityResolver(Service):
    """Maps an external identity assertion to exactly one local user.

    Resolution order:
    1. The user already linked to the provider ID is refreshed.
    2. Otherwise the oldest user with the asserted email is linked
       (its provider ID is only filled in when empty) and refreshed.
    3. Otherwise a new user is created.

    Each step is a single atomic write in the store, and the create step
    is an upsert on the unique provider ID, so concurrent first sign-ins
    for the same identity end up on the same user.

    Soft-deleted users are still matched by steps 1 and 2. This keeps the
    established behaviour; it is logged as a warning when it happens.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize identity resolver.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def resolve_identity(
        self,
        external_provider_id: str,
        email: str,
        display_name: str | None = None,
        avatar_url: str | None = None,
    ) -> User:
        """Resolve an external identity to a local user, creating it if needed.

        Always writes: a successful sign-in proves email ownership, so
        ``email_verified_at`` is refreshed on every call. Name, avatar URL
        and (for linked users) email are only overwritten by non-empty values.

        Args:
            external_provider_id: Subject ID from the identity provider
            email: Verified email from the identity provider
            display_name: Display name, if the provider supplied one
            avatar_url: Avatar URL, if the provider supplied one

        Returns:
            The created or updated user

        Raises:
            ValidationError: If the provider ID or email is blank
            TransientStoreError: If the store is unreachable
        """
        if not external_provider_id or not external_provider_id.strip():
            raise ValidationError("External provider ID is required")
        if not email or not email.strip():
            raise ValidationError("Email is required")

        assertion = IdentityAssertion(
            external_provider_id=external_provider_id,
            email=email,
            display_name=display_name,
            avatar_url=avatar_url,
        )

        with logfire.span(
            "identity_resolver.resolve_identity",
            external_provider_id=external_provider_id,
            email=email,
        ):
            verified_at = utc_now()

            user = await self.user_repository.refresh_linked_identity(
                assertion, verified_at
            )
            if user:
                logfire.info(
                    "Linked user refreshed",
                    user_id=user.user_id,
                    external_provider_id=external_provider_id,
                )
                return self._flag_deleted(user)

            user = await self.user_repository.link_identity_by_email(
                assertion, verified_at
            )
            if user:
                if user.external_provider_id != external_provider_id:
                    logfire.warn(
                        "Email matched a user linked to another identity, keeping existing link",
                        user_id=user.user_id,
                        linked_provider_id=user.external_provider_id,
                        asserted_provider_id=external_provider_id,
                    )
                else:
                    logfire.info(
                        "Identity linked to existing user by email",
                        user_id=user.user_id,
                        external_provider_id=external_provider_id,
                    )
                return self._flag_deleted(user)

            candidate = User(
                user_id=new_user_id(),
                name=display_name or email,
                email=email,
                external_provider_id=external_provider_id,
                avatar_url=avatar_url or None,
                email_verified_at=verified_at,
                role=UserRole.USER,
                status=UserStatus.ACTIVE,
                created_at=verified_at,
                updated_at=verified_at,
            )
            user = await self.user_repository.create_linked_identity(
                candidate, assertion
            )
            if user.user_id == candidate.user_id:
                logfire.info(
                    "User created from identity",
                    user_id=user.user_id,
                    external_provider_id=external_provider_id,
                )
            else:
                # A concurrent sign-in created the user first
                logfire.info(
                    "Concurrent sign-in resolved to existing user",
                    user_id=user.user_id,
                    external_provider_id=external_provider_id,
                )
            return self._flag_deleted(user)

    @staticmethod
    def _flag_deleted(user: User) -> User:
        if user.is_deleted:
            logfire.warn(
                "Identity resolved to a soft-deleted user",
                user_id=user.user_id,
                external_provider_id=user.external_provider_id,
            )
        return user
