"""Entity identifiers: emptiness checks and id field access.

An id is "null or empty" when it cannot belong to a persisted entity:
``None``, a blank string, numeric zero, the nil UUID, an empty container,
or a wrapper (pydantic ``RootModel``) around any of those.
"""

from collections.abc import Sized
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import RootModel, field_validator

from entitykit.domain.value.common import ValueObject


def is_null_or_empty(value: Any) -> bool:
    """Return True if ``value`` is not a usable entity identifier.

    Args:
        value: Candidate identifier

    Returns:
        True for None and the default/empty value of the id's type
    """
    if value is None:
        return True
    if isinstance(value, RootModel):
        return is_null_or_empty(value.root)
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, bool):
        return not value
    if isinstance(value, (int, float, Decimal)):
        return value == 0
    if isinstance(value, UUID):
        return value.int == 0
    if isinstance(value, (bytes, Sized)):
        return len(value) == 0
    return False


class EntityIdentity(ValueObject):
    """Accessor for the single identifying attribute of an entity.

    Example:
        identity = EntityIdentity(field="employee_id")
        identity.get(employee)       # -> employee.employee_id
        identity.set(employee, 42)
    """

    field: str = "id"

    @field_validator("field")
    @classmethod
    def validate_field(cls, v: str) -> str:
        """Validate field is a usable attribute name."""
        if not v.isidentifier():
            raise ValueError(f"Not a valid attribute name: {v!r}")
        return v

    def get(self, entity: Any) -> Any:
        """Read the id from an entity."""
        return getattr(entity, self.field)

    def set(self, entity: Any, value: Any) -> None:
        """Write the id onto an entity."""
        setattr(entity, self.field, value)

    def is_transient(self, entity: Any) -> bool:
        """Whether the entity carries no usable id yet."""
        return is_null_or_empty(self.get(entity))
