"""Integration test setup.

Integration tests run against the database in ``DATABASE__URL`` with the
Alembic migrations applied. They are skipped when it is unreachable.
"""

import asyncio

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine

from qafeed.config import Settings
from qafeed.persistence.tables import metadata


async def _schema_ready(database_url: str) -> bool:
    engine = create_async_engine(database_url)
    try:
        async with engine.connect() as connection:
            tables = await connection.run_sync(
                lambda sync_conn: set(inspect(sync_conn).get_table_names())
            )
    except (SQLAlchemyError, OSError):
        return False
    finally:
        await engine.dispose()
    return set(metadata.tables) <= tables


@pytest.fixture(scope="session", autouse=True)
def require_database():
    """Skip integration tests unless a migrated database is available."""
    database_url = Settings().database_url
    if not asyncio.run(_schema_ready(database_url)):
        pytest.skip(f"No migrated database at {database_url}")
