"""Infrastructure providers."""

from .persistence import ProdPersistenceProvider

__all__ = ["ProdPersistenceProvider"]
