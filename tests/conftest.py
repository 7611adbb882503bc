"""Shared pytest fixtures for all tests."""

import sqlite3
import pytest
from pathlib import Path

from auth.local import LocalAuthManager
from config import Config, get_migrations_dir
from services.base import Services
from tests.helpers import FakeAuthManager, run_migrations


@pytest.fixture
def test_db():
    """Create an in-memory SQLite database for testing.

    The connection is shared with the worker threads the local auth backend
    uses, so thread checks are disabled.

    Yields:
        sqlite3.Connection: Connection to in-memory database.
    """
    conn = sqlite3.connect(":memory:", check_same_thread=False)
    conn.execute("PRAGMA foreign_keys = ON")
    yield conn
    conn.close()


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary directory.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "savvy-snip",
        db_data_dir=tmp_path / "savvy-snip" / "db",
        db_filename="test.db",
        log_level="DEBUG",
        log_dir=tmp_path / "savvy-snip" / "logs",
        auth_backend="local",
    )


@pytest.fixture
def db_manager_with_schema(test_db):
    """Create a database manager whose in-memory database has every migration applied.

    Args:
        test_db: In-memory database connection fixture.

    Returns:
        A stand-in for DatabaseManager backed by the in-memory connection.
    """
    run_migrations(test_db, get_migrations_dir())

    class TestDatabaseManager:
        """Test database manager that uses in-memory connection."""

        def __init__(self, conn):
            self.conn = conn

        def connect(self):
            """Return a context manager for the test connection."""
            return _TestConnectionContext(self.conn)

        def get_db_path(self):
            """Return a fake path for the test database."""
            return Path(":memory:")

        def get_migrations_dir(self):
            """Get the migrations directory path."""
            return get_migrations_dir()

    class _TestConnectionContext:
        """Context manager for test database connections."""

        def __init__(self, conn):
            self.conn = conn

        def __enter__(self):
            return self.conn

        def __exit__(self, exc_type, exc_val, exc_tb):
            # The fixture owns the connection
            pass

    return TestDatabaseManager(test_db)


@pytest.fixture
def services(test_config, db_manager_with_schema):
    """Create a Services container with test database.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config, db_manager=db_manager_with_schema)


@pytest.fixture
def local_auth(services):
    """Create a LocalAuthManager on the test database."""
    return LocalAuthManager(services)


@pytest.fixture
def signed_in_user(services):
    """Register a user directly in the database and sign them in."""
    user = services.users.create("ada", "ada@example.com")
    services.sessions.start(user.id)
    return user


@pytest.fixture
def fake_auth():
    """Create a scripted in-memory auth backend."""
    return FakeAuthManager()
