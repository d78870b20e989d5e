"""Sign-in use case."""

import logfire
from pydantic import BaseModel

from lending.domain.service import IdentityResolver, JWTService
from lending.domain.value import UserRole


class SignInRequest(BaseModel):
    """Sign-in request from the authentication layer.

    Carries the attributes asserted by the identity provider after it has
    verified the user.
    """

    external_provider_id: str
    email: str
    display_name: str | None = None
    avatar_url: str | None = None


class SignInResponse(BaseModel):
    """Sign-in response."""

    token: str
    user_id: str
    role: UserRole
    is_new_user: bool


class SignInUseCase:
    """Use case for signing a user in from an external identity."""

    def __init__(
        self,
        identity_resolver: IdentityResolver,
        jwt_service: JWTService,
    ) -> None:
        """Initialize sign-in use case.

        Args:
            identity_resolver: Identity resolution domain service
            jwt_service: JWT token domain service
        """
        self.identity_resolver = identity_resolver
        self.jwt_service = jwt_service

    async def execute(self, request: SignInRequest) -> SignInResponse:
        """Execute sign-in flow.

        Steps:
        1. Resolve the asserted identity to a local user (created if needed)
        2. Issue a session token carrying the user's ID and role

        Args:
            request: Identity assertion from the provider

        Returns:
            Session token and user info

        Raises:
            ValidationError: If provider ID or email is blank
            TransientStoreError: If the store is unreachable
        """
        with logfire.span(
            "sign_in.execute", external_provider_id=request.external_provider_id
        ):
            user = await self.identity_resolver.resolve_identity(
                external_provider_id=request.external_provider_id,
                email=request.email,
                display_name=request.display_name,
                avatar_url=request.avatar_url,
            )
            token = self.jwt_service.create_token(user)

            return SignInResponse(
                token=token,
                user_id=user.user_id,
                role=user.role,
                # Created users are stamped verified at creation time
                is_new_user=user.created_at == user.email_verified_at,
            )
