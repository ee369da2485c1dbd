"""Test harness for tests that need a DI container.

Every test gets its own container, and so its own in-memory SQLite
database with the test schema already created.
"""

import pytest

from tests.di import build_test_container


def create_env_fixture():
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a fresh test container (new in-memory database)
    - Yields a request-scoped container for service access
    - Commits the request session and disposes the engine afterwards

    Returns:
        Pytest fixture function that yields a request-scoped Container

    Usage:
        integration_env = create_env_fixture()

        def test_add_employee(integration_env):
            service = integration_env.get(EmployeeService)
            employee = service.add(Employee(first_name="Ada"))
            assert employee.id is not None
    """

    @pytest.fixture
    def _test_environment():
        container = build_test_container()

        # Open request-scoped context
        with container() as request_container:
            yield request_container

        container.close()

    return _test_environment
