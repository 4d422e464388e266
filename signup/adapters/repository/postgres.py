"""
PostgreSQL repository adapter - Implements AccountRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Uniqueness
----------
The validator looks the email up before registration, but that lookup and
the INSERT are separate statements. The UNIQUE constraint on
``accounts.email`` is what actually guarantees one account per address:
``create`` uses ``INSERT ... ON CONFLICT (email) DO NOTHING`` and reports a
conflict by returning None instead of raising.

Error translation
-----------------
Every psycopg error is converted to the domain's PersistenceFailed so that
driver details never cross the port boundary.
"""

import logging
from typing import Any

import psycopg
from psycopg_pool import ConnectionPool

from signup.domain.account import Account, NewAccount
from signup.domain.exceptions import PersistenceFailed

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
    CREATE TABLE IF NOT EXISTS accounts (
        id BIGSERIAL PRIMARY KEY,
        username VARCHAR(32) NOT NULL,
        email VARCHAR(320) NOT NULL UNIQUE,
        password_hash TEXT NOT NULL,
        inactive BOOLEAN NOT NULL DEFAULT TRUE,
        activation_token VARCHAR(64) NOT NULL,
        created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
    )
"""

_COLUMNS = "id, username, email, password_hash, inactive, activation_token, created_at"


def _row_to_account(row: tuple[Any, ...]) -> Account:
    return Account(
        id=row[0],
        username=row[1],
        email=row[2],
        password_hash=row[3],
        inactive=row[4],
        activation_token=row[5],
        created_at=row[6],
    )


class PostgresAccountRepository:
    """
    Implements AccountRepository protocol via psycopg3.

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

    def create(self, account: NewAccount) -> Account | None:
        """
        Insert a new account.

        Returns:
            The stored Account, or None if the email already exists
        """
        sql = f"""
            INSERT INTO accounts (username, email, password_hash, inactive, activation_token)
            VALUES (%s, %s, %s, %s, %s)
            ON CONFLICT (email) DO NOTHING
            RETURNING {_COLUMNS}
        """
        params = (
            account.username,
            account.email,
            account.password_hash,
            account.inactive,
            account.activation_token,
        )

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, params)
                row = cursor.fetchone()
                conn.commit()
        except psycopg.Error as e:
            logger.exception("Account insert failed")
            raise PersistenceFailed("Account could not be stored") from e

        return _row_to_account(row) if row is not None else None

    def find_by_email(self, email: str) -> Account | None:
        sql = f"SELECT {_COLUMNS} FROM accounts WHERE email = %s"
        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (email,))
                row = cursor.fetchone()
        except psycopg.Error as e:
            logger.exception("Account lookup failed")
            raise PersistenceFailed("Account lookup failed") from e

        return _row_to_account(row) if row is not None else None

    def find_all(self) -> list[Account]:
        sql = f"SELECT {_COLUMNS} FROM accounts ORDER BY id"
        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql)
                rows = cursor.fetchall()
        except psycopg.Error as e:
            raise PersistenceFailed("Account listing failed") from e

        return [_row_to_account(row) for row in rows]

    def delete_all(self) -> None:
        try:
            with self._pool.connection() as conn:
                conn.execute("DELETE FROM accounts")
                conn.commit()
        except psycopg.Error as e:
            raise PersistenceFailed("Account deletion failed") from e

    def ping(self) -> None:
        try:
            with self._pool.connection() as conn:
                conn.execute("SELECT 1")
        except psycopg.Error as e:
            raise PersistenceFailed("Database unreachable") from e


def ensure_schema(pool: ConnectionPool) -> None:
    """
    Create the accounts table if it does not exist yet.

    Idempotent; run once at application startup.

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    logger.info("Ensuring accounts table exists")
    try:
        with pool.connection() as conn:
            conn.execute(SCHEMA_SQL)
    except psycopg.Error as e:
        logger.error("Schema creation failed - %s", e)
        raise RuntimeError("Database schema creation failed") from e
