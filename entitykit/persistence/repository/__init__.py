"""Reference data service implementations."""

from entitykit.persistence.repository.inmemory import (
    InMemoryEntityDataService,
    sequential_ids,
)
from entitykit.persistence.repository.sql import SqlAlchemyEntityDataService

__all__ = [
    "InMemoryEntityDataService",
    "SqlAlchemyEntityDataService",
    "sequential_ids",
]
