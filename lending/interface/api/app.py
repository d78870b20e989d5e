"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lending.config import Settings
from lending.interface.api.routes import (
    applications,
    contracts,
    counsels,
    health,
    judgments,
    repayments,
    terms,
    users,
)
from lending.interface.error import register_error_handlers
from lending.util.di.container import create_container, setup_di
from lending.util.observability import SERVICE_VERSION, instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it and passes a test container.

    Args:
        container: DI container; the production container is built when omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Lending API",
        description=(
            "Users, terms agreements and the loan workflow from counsel "
            "through repayment for the lending platform"
        ),
        version=SERVICE_VERSION,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,  # Session token travels in a cookie
        allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(users.router)
    app_instance.include_router(terms.router)
    app_instance.include_router(counsels.router)
    app_instance.include_router(applications.router)
    app_instance.include_router(judgments.router)
    app_instance.include_router(contracts.router)
    app_instance.include_router(repayments.router)

    return app_instance
