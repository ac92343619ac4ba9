"""Configuration providers for the Social API container.

Settings are read once per container (APP scope); the domain providers
depend on the nested ``AuthSettings`` and the persistence providers on the
full ``Settings`` for the database URL and pool sizing.
"""

from dishka import Scope, provide

from social.config import AuthSettings, Settings
from social.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth
