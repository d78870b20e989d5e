"""JWT token domain service."""

import logfire

from lending.config import AuthSettings
from lending.domain.model import User
from lending.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user: User) -> str:
        """Create a session token embedding the user's ID and role.

        Args:
            user: Resolved user

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user.user_id):
            token = create_token(
                user.user_id, user.email, user.role.value, self.auth_settings
            )
            logfire.info("JWT token created", user_id=user.user_id, role=user.role.value)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
