"""Data service interfaces.

Interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from entitykit.domain.repository.data_service import EntityDataService

__all__ = ["EntityDataService"]
