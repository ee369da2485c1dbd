"""Observability configuration using Logfire.

Domain and data services emit logfire spans and events directly:

    import logfire

    with logfire.span("domain_service.add", entity="Employee"):
        logfire.info("Entity added", entity_id="42")
"""

import logfire
from sqlalchemy import Engine

from entitykit import __version__
from entitykit.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Telemetry is only sent to Logfire cloud when explicitly enabled or when a
    token is configured; otherwise output stays on the console (or nowhere,
    if console output is disabled).

    Args:
        settings: Application settings
    """
    # Priority: explicit setting > token presence > default (False)
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs = {
        "service_name": settings.service_name,
        "service_version": __version__,
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": (
            logfire.ConsoleOptions(
                colors="auto",
                span_style="show-parents",
                include_timestamps=True,
                verbose=settings.debug,
            )
            if settings.observability.console
            else False
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )


def instrument_sqlalchemy(engine: Engine) -> None:
    """Instrument SQLAlchemy engine with Logfire.

    Automatically traces every SQL statement and its duration.

    Args:
        engine: SQLAlchemy engine
    """
    logfire.instrument_sqlalchemy(engine=engine)
    logfire.info("SQLAlchemy instrumented")
