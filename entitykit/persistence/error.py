"""Persistence layer errors.

These are store-level failures. DomainService does not interpret them;
they reach the caller unchanged.
"""

from typing import Any


class DataServiceError(Exception):
    """Base persistence error."""

    pass


class EntityNotStoredError(DataServiceError):
    """Raised when an update or delete targets an entity that is not stored."""

    def __init__(self, resource: str, identifier: Any):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} is not stored: {identifier}")


class DuplicateEntityError(DataServiceError):
    """Raised when an add carries an id that is already stored."""

    def __init__(self, resource: str, identifier: Any):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} already exists: {identifier}")
