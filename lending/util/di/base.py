"""Provider base class."""

from typing import ClassVar, Literal

from dishka import Provider

# Components whose implementation tests can swap out
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for every provider in ``PROVIDERS``.

    Attributes:
        __mock_component__: Name of the swappable component this provider
            implements, None for providers that are never swapped
        __is_mock__: True on the test implementation of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
