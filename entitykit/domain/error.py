"""Domain layer errors."""

from typing import Any


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class InvalidArgumentError(ValidationError, ValueError):
    """Raised when a required id is null/empty or a required entity is missing.

    Always raised before the data service is touched.
    """

    def __init__(self, argument: str, message: str | None = None):
        self.argument = argument
        super().__init__(message or f"Invalid argument: {argument}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: Any):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
