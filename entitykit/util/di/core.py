"""Core DI providers."""

from dishka import Scope, provide

from entitykit.config import DatabaseSettings, Settings
from entitykit.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider.

    Settings are loaded from environment variables and .env file unless the
    caller already loaded them.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.settings = settings

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings."""
        return self.settings or Settings()

    @provide(scope=Scope.APP)
    def provide_database_settings(self, settings: Settings) -> DatabaseSettings:
        """Provide database settings."""
        return settings.database
