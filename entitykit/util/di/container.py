"""Dependency injection container."""

from dishka import Container, Provider, make_container
from sqlalchemy import MetaData

from entitykit.config import Settings
from entitykit.util.di.core import ProdConfigProvider
from entitykit.util.di.infrastructure import ProdPersistenceProvider
from entitykit.util.logging import setup_logging
from entitykit.util.observability import configure_logfire


def create_container(*providers: Provider, metadata: MetaData | None = None) -> Container:
    """Build production container.

    Loads settings from the environment and configures Logfire and logging
    before any provider runs.

    Args:
        providers: Application providers (data services, domain services)
        metadata: Tables to create when ``database.create_schema`` is enabled

    Returns:
        Configured DI container
    """
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    return make_container(
        ProdConfigProvider(settings),
        ProdPersistenceProvider(metadata),
        *providers,
    )
