"""Session token checks shared by the API routes."""

from fastapi import HTTPException, status

from lending.domain.service import JWTService
from lending.domain.value import UserRole
from lending.util.jwt import JWTError, TokenPayload

AUTH_COOKIE = "auth_token"


def authenticate(jwt_service: JWTService, auth_token: str | None) -> TokenPayload:
    """Verify the session token from the auth cookie.

    Args:
        jwt_service: JWT service from DI
        auth_token: JWT token from cookie

    Returns:
        Token payload

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        return jwt_service.verify_token(auth_token)
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )


def require_admin(jwt_service: JWTService, auth_token: str | None) -> TokenPayload:
    """Verify the session token and require the admin role.

    Raises:
        HTTPException: 401 if not authenticated, 403 if not an admin
    """
    payload = authenticate(jwt_service, auth_token)
    if payload.role != UserRole.ADMIN.value:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin role required",
        )
    return payload
