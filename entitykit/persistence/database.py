"""Database connection and session management.

Provides the SQLAlchemy engine and session factory used by the SQL data
service.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import Engine, MetaData, create_engine as sa_create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from entitykit.config import DatabaseSettings
from entitykit.util.error import ConfigurationError


def create_engine(settings: DatabaseSettings, debug: bool = False) -> Engine:
    """Create database engine.

    In-memory SQLite shares one connection across sessions so every session
    sees the same database.

    Args:
        settings: Database settings with URL and pool sizing
        debug: Log SQL statements

    Returns:
        Configured engine

    Raises:
        ConfigurationError: If the database URL cannot be parsed
    """
    try:
        url = make_url(settings.url)
    except ArgumentError as e:
        raise ConfigurationError(f"Invalid database URL: {settings.url!r}") from e
    echo = settings.echo or debug

    if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
        return sa_create_engine(
            url,
            echo=echo,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )

    if url.get_backend_name() == "sqlite":
        return sa_create_engine(url, echo=echo)

    return sa_create_engine(
        url,
        echo=echo,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
    )


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return sessionmaker(
        engine,
        class_=Session,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
    )


def create_schema(engine: Engine, metadata: MetaData) -> None:
    """Create all tables in ``metadata`` that do not exist yet."""
    metadata.create_all(engine)


@contextmanager
def get_session(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    """Get database session that commits on success and rolls back on error.

    Args:
        session_factory: Factory for creating sessions

    Yields:
        Database session
    """
    with session_factory() as session:
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
