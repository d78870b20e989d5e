"""Dependency injection wiring.

Every provider class is listed once in ``PROVIDERS``. A provider with
subclasses is a swappable component: its subclasses are the production and
mock implementations, told apart by ``__is_mock__``.
"""

from typing import Type

from lending.util.di.application import ProdApplicationProvider
from lending.util.di.base import Component, ProviderBase
from lending.util.di.core import ProdConfigProvider
from lending.util.di.domain import ProdDomainProvider
from lending.util.di.infrastructure import PersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for a ``PROVIDERS`` entry.

    Args:
        base: Entry from ``PROVIDERS``
        use_mock: Select the mock implementation of a swappable component

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = {
        getattr(impl, "__is_mock__", False): impl for impl in base.__subclasses__()
    }
    if not implementations:
        return base

    try:
        return implementations[use_mock]
    except KeyError:
        kind = "mock" if use_mock else "production"
        component = getattr(base, "__mock_component__", None) or base.__name__
        raise ValueError(f"No {kind} implementation for {component}") from None


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
]
