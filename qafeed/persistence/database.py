"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL.
"""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from qafeed.config import Settings
from qafeed.domain.error import StorageError


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Re-raise driver failures as StorageError.

    IntegrityError passes through untouched so services can turn
    constraint violations into business rule errors.

    Args:
        operation: Name of the repository operation, used in the message

    Raises:
        StorageError: If SQLAlchemy raised anything but IntegrityError
    """
    try:
        yield
    except IntegrityError:
        raise
    except SQLAlchemyError as e:
        raise StorageError(operation, e) from e
