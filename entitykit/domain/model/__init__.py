"""Domain model base classes."""

from entitykit.domain.model.common import DomainModel

__all__ = ["DomainModel"]
