"""
PostgreSQL repository adapter - Implements AccountRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Integrity:
---------
The accounts table carries PRIMARY KEY (id) and UNIQUE (email). save()
uses INSERT ... ON CONFLICT DO NOTHING, so of two concurrent inserts for
the same email exactly one row is written; the loser sees rowcount 0 and
gets a PersistenceError instead of overwriting the winner.
"""

import logging
from pathlib import Path

import psycopg
from psycopg_pool import ConnectionPool

from src.domain.account import Account
from src.domain.email import Email, EmailNormalization
from src.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class PostgresAccountRepository:
    """
    Implements AccountRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(
        self,
        pool: ConnectionPool,
        email_normalization: EmailNormalization = EmailNormalization.LOWERCASE,
    ) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
            email_normalization: Policy used when rebuilding Email values from rows
        """
        self._pool = pool
        self._email_normalization = email_normalization

    def find_by_email(self, email: Email) -> Account | None:
        sql = """
            SELECT id, email, password_hash
            FROM accounts
            WHERE email = %s
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (str(email),))
                row = cursor.fetchone()
        except psycopg.Error as e:
            logger.error("Failed to look up account by email: %s", e)
            raise PersistenceError("Could not look up account") from e

        if row is None:
            return None
        return self._to_account(row)

    def save(self, account: Account) -> None:
        """
        Insert a new account row.

        Args:
            account: Account with hashed password

        Raises:
            PersistenceError: If the id or email already exists, or the
                database rejects the statement
        """
        sql = """
            INSERT INTO accounts (id, email, password_hash, created_at)
            VALUES (%s, %s, %s, NOW())
            ON CONFLICT DO NOTHING
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (account.id, str(account.email), account.password))
                conn.commit()
                inserted = cursor.rowcount == 1
        except psycopg.Error as e:
            logger.error("Failed to insert account %s: %s", account.id, e)
            raise PersistenceError(f"Could not save account {account.id}") from e

        if not inserted:
            raise PersistenceError(f"Account id or email already exists: {account.id}")

    def get_all(self) -> list[Account]:
        sql = """
            SELECT id, email, password_hash
            FROM accounts
            ORDER BY created_at, id
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql)
                rows = cursor.fetchall()
        except psycopg.Error as e:
            logger.error("Failed to list accounts: %s", e)
            raise PersistenceError("Could not list accounts") from e

        return [self._to_account(row) for row in rows]

    def _to_account(self, row: tuple[str, str, str]) -> Account:
        account_id, email, password_hash = row
        return Account(
            id=account_id,
            email=Email(email, normalization=self._email_normalization),
            password=password_hash,
        )


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
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
