"""
Shared fixtures for adversarial tests.

Provides common test infrastructure for race condition tests.
"""

import pytest
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import PostgresUserRepository

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial


@pytest.fixture
def repository(pool: ConnectionPool, clean_database: None) -> PostgresUserRepository:
    """Create repository instance for each test over a clean table."""
    return PostgresUserRepository(pool)
