"""Test providers."""

from .config import MockConfigProvider
from .container import build_test_container
from .employee import EmployeeProvider

__all__ = [
    "EmployeeProvider",
    "MockConfigProvider",
    "build_test_container",
]
