"""
Shared test fixtures and configuration.

Database-backed fixtures live here so integration and adversarial suites
share one pool. Tests that need PostgreSQL are skipped when it is not
reachable at DATABASE_URL.
"""

from collections.abc import Generator

import psycopg
import pytest
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.config.settings import get_settings


@pytest.fixture(scope="session")
def database_url() -> str:
    """Database URL, skipping the requesting test if PostgreSQL is down."""
    url = get_settings().database_url
    try:
        with psycopg.connect(url, connect_timeout=2):
            pass
    except psycopg.OperationalError as e:
        pytest.skip(f"PostgreSQL not available: {e}")
    return url


@pytest.fixture(scope="module")
def pool(database_url: str) -> Generator[ConnectionPool, None, None]:
    """Create connection pool with the schema migrated."""
    pool = ConnectionPool(conninfo=database_url, min_size=1, max_size=10, open=True)
    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture
def clean_database(pool: ConnectionPool) -> Generator[None, None, None]:
    """Clean users table before each test."""
    with pool.connection() as conn:
        conn.execute("DELETE FROM users")
        conn.commit()
    yield
