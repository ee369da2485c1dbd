"""Test settings provider."""

from dishka import Scope, provide

from entitykit.config import DatabaseSettings, ObservabilitySettings, Settings
from entitykit.util.di import ProviderBase


class MockConfigProvider(ProviderBase):
    """Settings for tests: in-memory SQLite with the schema created on start."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide test settings."""
        return Settings(
            environment="test",
            database=DatabaseSettings(
                url="sqlite+pysqlite:///:memory:", create_schema=True
            ),
            observability=ObservabilitySettings(send_to_logfire=False, console=False),
        )

    @provide(scope=Scope.APP)
    def provide_database_settings(self, settings: Settings) -> DatabaseSettings:
        """Provide database settings."""
        return settings.database
