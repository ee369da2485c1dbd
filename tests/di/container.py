"""Test container builder."""

from dishka import Container, make_container

from entitykit.util.di import ProdPersistenceProvider
from tests.di.config import MockConfigProvider
from tests.di.employee import EmployeeProvider
from tests.model import metadata


def build_test_container() -> Container:
    """Build test container.

    Uses the production persistence provider against in-memory SQLite, so no
    external services are needed.

    Returns:
        Configured test container
    """
    return make_container(
        MockConfigProvider(),
        ProdPersistenceProvider(metadata),
        EmployeeProvider(),
    )
