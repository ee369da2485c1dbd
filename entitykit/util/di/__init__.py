"""Dependency injection module."""

from entitykit.util.di.base import ProviderBase
from entitykit.util.di.container import create_container
from entitykit.util.di.core import ProdConfigProvider
from entitykit.util.di.infrastructure import ProdPersistenceProvider

__all__ = [
    "ProdConfigProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "create_container",
]
