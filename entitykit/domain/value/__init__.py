"""Domain value objects."""

from entitykit.domain.value.common import ValueObject
from entitykit.domain.value.identity import EntityIdentity, is_null_or_empty

__all__ = [
    "EntityIdentity",
    "ValueObject",
    "is_null_or_empty",
]
