"""Production container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from lending.config import Settings
from lending.util.di import PROVIDERS, get_provider


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """Build the container with every production implementation.

    Args:
        settings: Settings to serve; loaded from the environment when omitted
    """
    providers = [get_provider(base)() for base in PROVIDERS]
    return make_async_container(
        *providers,
        FastapiProvider(),
        context={Settings: settings or Settings()},
    )


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Serve ``FromDishka`` route dependencies from the container."""
    setup_dishka(container, app)
