"""Generic CRUD domain services and data-service contract tests."""

__version__ = "0.1.0"
