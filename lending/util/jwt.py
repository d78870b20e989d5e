"""Session token encoding with PyJWT."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from lending.config import AuthSettings

# Claims every session token must carry
REQUIRED_CLAIMS = ["user_id", "email", "role", "exp", "iat"]


class TokenPayload(BaseModel):
    """Decoded session token."""

    user_id: str
    email: str
    role: str
    exp: datetime
    iat: datetime


class JWTError(Exception):
    """Session token is missing, malformed, forged or expired."""

    pass


def create_token(user_id: str, email: str, role: str, settings: AuthSettings) -> str:
    """Encode a session token.

    Args:
        user_id: Local user ID
        email: User email
        role: User role, checked by admin-only routes
        settings: Authentication settings

    Returns:
        Encoded JWT
    """
    issued_at = datetime.now(timezone.utc)
    claims = {
        "user_id": user_id,
        "email": email,
        "role": role,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Decode a session token and check its signature and expiry.

    Raises:
        JWTError: If the token is invalid or expired
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
        return TokenPayload(**claims)
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except (jwt.InvalidTokenError, ValidationError) as e:
        raise JWTError("Invalid token") from e
