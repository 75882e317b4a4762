"""
Unit tests for PostgresAccountRepository error handling and run_migrations.

Uses a mocked connection pool, so no database is required.
"""

from unittest.mock import MagicMock

import psycopg
import pytest

from src.adapters.repository.postgres import PostgresAccountRepository, run_migrations
from src.domain.account import Account
from src.domain.email import create_email
from src.domain.exceptions import PersistenceError


def make_pool() -> tuple[MagicMock, MagicMock, MagicMock]:
    """Create a pool mock wired so that `pool.connection()` and `conn.cursor()` work as context managers."""
    pool = MagicMock()
    conn = pool.connection.return_value.__enter__.return_value
    cursor = conn.cursor.return_value.__enter__.return_value
    # Context managers must not swallow exceptions raised inside them
    pool.connection.return_value.__exit__.return_value = False
    conn.cursor.return_value.__exit__.return_value = False
    return pool, conn, cursor


def make_account() -> Account:
    return Account(id="abc", email=create_email("user@example.com"), password="$2b$10$hash")


class TestSaveErrors:
    """Tests for save() failure paths."""

    def test_database_error_wrapped_in_persistence_error(self) -> None:
        pool, _, cursor = make_pool()
        failure = psycopg.OperationalError("connection lost")
        cursor.execute.side_effect = failure

        with pytest.raises(PersistenceError) as exc_info:
            PostgresAccountRepository(pool).save(make_account())

        assert exc_info.value.__cause__ is failure

    def test_zero_rowcount_raises_persistence_error(self) -> None:
        pool, conn, cursor = make_pool()
        cursor.rowcount = 0

        with pytest.raises(PersistenceError, match="already exists"):
            PostgresAccountRepository(pool).save(make_account())

        conn.commit.assert_called_once()

    def test_inserted_row_returns_none(self) -> None:
        pool, _, cursor = make_pool()
        cursor.rowcount = 1

        assert PostgresAccountRepository(pool).save(make_account()) is None
        args = cursor.execute.call_args[0]
        assert args[1] == ("abc", "user@example.com", "$2b$10$hash")


class TestReadErrors:
    """Tests for find_by_email() and get_all() failure paths."""

    def test_find_by_email_wraps_database_error(self) -> None:
        pool, _, cursor = make_pool()
        failure = psycopg.OperationalError("connection lost")
        cursor.execute.side_effect = failure

        with pytest.raises(PersistenceError) as exc_info:
            PostgresAccountRepository(pool).find_by_email(create_email("user@example.com"))

        assert exc_info.value.__cause__ is failure

    def test_get_all_wraps_database_error(self) -> None:
        pool, _, cursor = make_pool()
        failure = psycopg.OperationalError("connection lost")
        cursor.execute.side_effect = failure

        with pytest.raises(PersistenceError) as exc_info:
            PostgresAccountRepository(pool).get_all()

        assert exc_info.value.__cause__ is failure

    def test_find_by_email_maps_row(self) -> None:
        pool, _, cursor = make_pool()
        cursor.fetchone.return_value = ("abc", "user@example.com", "$2b$10$hash")

        found = PostgresAccountRepository(pool).find_by_email(create_email("USER@example.com"))

        assert found == make_account()
        assert cursor.execute.call_args[0][1] == ("user@example.com",)

    def test_find_by_email_absent_returns_none(self) -> None:
        pool, _, cursor = make_pool()
        cursor.fetchone.return_value = None

        assert PostgresAccountRepository(pool).find_by_email(create_email("a@example.com")) is None


class TestRunMigrations:
    """Tests for run_migrations()."""

    def test_executes_migration_files(self) -> None:
        pool, conn, _ = make_pool()

        run_migrations(pool)

        executed = [call.args[0] for call in conn.execute.call_args_list]
        assert any("CREATE TABLE IF NOT EXISTS accounts" in sql for sql in executed)

    def test_failed_migration_raises_runtime_error(self) -> None:
        pool, conn, _ = make_pool()
        failure = psycopg.errors.SyntaxError("syntax error")
        conn.execute.side_effect = failure

        with pytest.raises(RuntimeError, match="Database migration failed") as exc_info:
            run_migrations(pool)

        assert exc_info.value.__cause__ is failure
