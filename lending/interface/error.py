"""Interface layer error handling.

Maps domain errors to HTTP responses with a uniform JSON body:
``{"error": <class name>, "message": <text>, "path": <url>}``.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from lending.domain.error import (
    ConflictError,
    DomainError,
    NotFoundError,
    TransientStoreError,
    ValidationError,
)
from lending.util.jwt import JWTError

STATUS_BY_ERROR: dict[type[DomainError], int] = {
    ValidationError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ConflictError: status.HTTP_409_CONFLICT,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    TransientStoreError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _error_response(
    request: Request, status_code: int, error: str, message: str
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "message": message, "path": str(request.url)},
    )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Handle domain errors raised by services and use cases."""
    status_code = next(
        (code for cls, code in STATUS_BY_ERROR.items() if isinstance(exc, cls)),
        status.HTTP_400_BAD_REQUEST,
    )
    if status_code == status.HTTP_503_SERVICE_UNAVAILABLE:
        logfire.error("Store unavailable", path=request.url.path, error=str(exc))
    return _error_response(request, status_code, exc.__class__.__name__, str(exc))


async def jwt_error_handler(request: Request, exc: JWTError) -> JSONResponse:
    """Handle invalid or expired session tokens."""
    return _error_response(
        request, status.HTTP_401_UNAUTHORIZED, exc.__class__.__name__, str(exc)
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle HTTP exceptions raised by routes."""
    return _error_response(request, exc.status_code, "HTTPException", str(exc.detail))


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request body and parameter validation errors."""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "ValidationError",
            "message": "Request validation failed",
            "details": jsonable_encoder(exc.errors()),
            "path": str(request.url),
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the app.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(JWTError, jwt_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
