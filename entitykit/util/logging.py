"""Standard library logging, routed into Logfire.

Library loggers (SQLAlchemy's echo output in particular) end up next to the
logfire spans of the operation that produced them.
"""

import logging

import logfire

from entitykit.config import Settings

# Loggers that only speak up when SQL echo or debug is on
SQL_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool")


def log_level(settings: Settings) -> int:
    """Pick the log level for the environment."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Send standard library log records to Logfire.

    Call after ``configure_logfire`` so records use the configured exporters.

    Args:
        settings: Application settings
    """
    level = log_level(settings)
    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,
    )

    sql_level = logging.INFO if settings.debug or settings.database.echo else logging.WARNING
    for name in SQL_LOGGERS:
        logging.getLogger(name).setLevel(sql_level)

    logging.getLogger("entitykit").setLevel(level)
