"""Persistence infrastructure providers."""

from collections.abc import Iterator

import logfire
from dishka import Scope, provide
from sqlalchemy import Engine, MetaData
from sqlalchemy.orm import Session, sessionmaker

from entitykit.config import Settings
from entitykit.persistence.database import (
    create_engine,
    create_schema,
    create_session_factory,
    get_session,
)
from entitykit.util.di.base import ProviderBase
from entitykit.util.observability import instrument_sqlalchemy


class ProdPersistenceProvider(ProviderBase):
    """Persistence provider for SQLAlchemy engines and sessions.

    Data services are entity-specific, so applications provide them
    themselves from the request-scoped ``Session`` this provider yields.
    """

    scope = Scope.APP

    def __init__(self, metadata: MetaData | None = None) -> None:
        """Initialize provider.

        Args:
            metadata: Tables to create on startup when
                ``database.create_schema`` is enabled
        """
        super().__init__()
        self.metadata = metadata

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> Iterator[Engine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings.database, debug=settings.debug)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)

        if settings.database.create_schema and self.metadata is not None:
            create_schema(engine, self.metadata)
            logfire.info("Schema created", tables=sorted(self.metadata.tables))

        yield engine
        engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: Engine) -> sessionmaker[Session]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    def get_session(self, session_factory: sessionmaker[Session]) -> Iterator[Session]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if an exception was raised.
        """
        try:
            with get_session(session_factory) as session:
                yield session
            logfire.info("Session committed")
        except Exception as e:
            logfire.warn("Session rollback", error=str(e))
            raise
