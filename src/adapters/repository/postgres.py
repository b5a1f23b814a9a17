"""
PostgreSQL repository adapter - Implements UserRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Uniqueness
----------
The `users.email` column carries a UNIQUE constraint. `create()` uses
INSERT ... ON CONFLICT (email) DO NOTHING RETURNING, so two concurrent
signups for the same email cannot both insert: the loser gets no row
back and `create()` returns None. The domain's `find_by_email()` pre-check
only short-circuits the common case.
"""

import logging
from pathlib import Path

from psycopg_pool import ConnectionPool

from src.domain.ports import Account

logger = logging.getLogger(__name__)

_ACCOUNT_COLUMNS = "id, email, password, name, created_at"


def _row_to_account(row: tuple) -> Account:
    return Account(
        id=row[0],
        email=row[1],
        password=row[2],
        name=row[3],
        created_at=row[4],
    )


class PostgresUserRepository:
    """
    Implements UserRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def find_by_email(self, email: str) -> Account | None:
        """
        Fetch the account stored under this email.

        Args:
            email: Email address

        Returns:
            Account if found, None otherwise
        """
        sql = f"SELECT {_ACCOUNT_COLUMNS} FROM users WHERE email = %s"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (email,))
            row = cursor.fetchone()

        if row is None:
            return None
        return _row_to_account(row)

    def create(self, email: str, password_hash: str, name: str) -> Account | None:
        """
        Insert a new account.

        Args:
            email: Email address
            password_hash: bcrypt-hashed password from domain layer
            name: Display name

        Returns:
            The stored Account, or None if the email already exists
        """
        sql = f"""
            INSERT INTO users (email, password, name, created_at)
            VALUES (%s, %s, %s, NOW())
            ON CONFLICT (email) DO NOTHING
            RETURNING {_ACCOUNT_COLUMNS}
        """

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (email, password_hash, name))
            row = cursor.fetchone()
            conn.commit()

        if row is None:
            return None
        return _row_to_account(row)


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning("Migrations directory not found: %s", migrations_dir)
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info("Running %d migration(s)", len(sql_files))

    for sql_file in sql_files:
        logger.info("Executing migration: %s", sql_file.name)
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info("Migration complete: %s", sql_file.name)
        except Exception as e:
            logger.error("Migration failed: %s - %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
