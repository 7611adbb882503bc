"""Database manager for SQLite connections, paths and schema migrations."""

import sqlite3
from contextlib import contextmanager
from typing import List
from config import Config, get_migrations_dir
from logger import get_logger

logger = get_logger(__name__)


class DatabaseManager:
    """Manages database connections and paths.

    Args:
        config: Application configuration object.
    """

    def __init__(self, config: Config):
        self.config = config

    @contextmanager
    def connect(self):
        """Get a database connection with automatic cleanup.

        Yields:
            sqlite3.Connection: Database connection with foreign keys enforced.
        """
        db_path = self.config.db_path
        db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(db_path)
        conn.execute("PRAGMA foreign_keys = ON")
        try:
            yield conn
        finally:
            conn.close()

    def get_db_path(self):
        """Get the current database path."""
        return self.config.db_path

    def get_migrations_dir(self):
        """Get the migrations directory path."""
        return get_migrations_dir()

    def available_migrations(self) -> List[str]:
        """List migration files shipped with the application, in apply order."""
        migrations_dir = self.get_migrations_dir()
        if not migrations_dir.exists():
            return []
        return sorted(path.name for path in migrations_dir.glob("*.sql"))

    def applied_migrations(self) -> List[str]:
        """List migration files already recorded in the database."""
        with self.connect() as conn:
            _init_schema_migrations_table(conn)
            cursor = conn.execute(
                "SELECT migration_file FROM schema_migrations ORDER BY migration_file"
            )
            return [row[0] for row in cursor.fetchall()]

    def apply_migrations(self) -> List[str]:
        """Apply every pending migration in order.

        Returns:
            Names of the migration files applied by this call.

        Raises:
            sqlite3.Error: If a migration fails. executescript commits as it
                goes, so statements before the failing one stay applied; the
                file is not recorded and later files are not run. Migrations
                use IF NOT EXISTS so a fixed file can be re-applied.
        """
        applied = set(self.applied_migrations())
        pending = [m for m in self.available_migrations() if m not in applied]

        with self.connect() as conn:
            for migration_file in pending:
                sql = (self.get_migrations_dir() / migration_file).read_text()
                try:
                    conn.executescript(sql)
                    conn.execute(
                        "INSERT INTO schema_migrations (migration_file) VALUES (?)",
                        (migration_file,),
                    )
                    conn.commit()
                    logger.info(f"Applied migration: {migration_file}")
                except sqlite3.Error as e:
                    conn.rollback()
                    logger.error(f"Error applying migration {migration_file}: {e}")
                    raise

        return pending


def _init_schema_migrations_table(conn):
    conn.execute("""
        CREATE TABLE IF NOT EXISTS schema_migrations (
            migration_file TEXT PRIMARY KEY,
            applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    """)
    conn.commit()
