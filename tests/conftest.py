"""Test configuration and fixtures."""

import logging

import pytest

# Contract cases live in the package; rewrite their asserts for readable failures
pytest.register_assert_rewrite("entitykit.testing")

from entitykit.config import ObservabilitySettings, Settings  # noqa: E402
from entitykit.util.observability import configure_logfire  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def _logfire():
    """Configure logfire once, local only and silent."""
    configure_logfire(
        Settings(
            environment="test",
            observability=ObservabilitySettings(send_to_logfire=False, console=False),
        )
    )


@pytest.fixture
def restore_root_logger():
    """Undo root logger changes made by setup_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    names = ("", "entitykit", "sqlalchemy.engine", "sqlalchemy.pool")
    levels = {name: logging.getLogger(name).level for name in names}
    yield root
    root.handlers[:] = handlers
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)
