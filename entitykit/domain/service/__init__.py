"""Domain services."""

from .base import Service
from .domain_service import DomainService

__all__ = [
    "DomainService",
    "Service",
]
