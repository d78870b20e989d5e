"""Configuration providers."""

from dishka import Scope, from_context, provide

from lending.config import AuthSettings, Settings
from lending.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings and their sections.

    ``Settings`` is passed in as container context so tests and scripts can
    build a container around settings they constructed themselves.
    """

    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth
