"""SQLite database adapter implementation (the default backend)."""

import sqlite3
from pathlib import Path
from typing import Any

from .errors import ConnectionError as DBConnectionError
from .errors import DatabaseError, SchemaError
from .errors import IntegrityError as DBIntegrityError
from .interface import SCHEMA_DIR, DatabaseAdapter


class SQLiteAdapter(DatabaseAdapter):
    """SQLite database adapter backed by a single database file."""

    def __init__(self, db_path: str | Path):
        """Initialize SQLite adapter.

        Args:
            db_path: Path to SQLite database file, or ":memory:"
        """
        self.db_path = Path(db_path)
        self._conn: sqlite3.Connection | None = None
        self._schema_file = SCHEMA_DIR / "schema_sqlite.sql"

    @property
    def _in_memory(self) -> bool:
        return str(self.db_path) == ":memory:"

    def _connection(self) -> sqlite3.Connection:
        if not self._conn:
            raise DatabaseError("No active connection")
        return self._conn

    def connect(self) -> None:
        """Open the database file, creating its parent directory if needed."""
        try:
            if not self._in_memory:
                self.db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(str(self.db_path))
            self._conn.row_factory = sqlite3.Row
        except (sqlite3.Error, OSError) as e:
            raise DBConnectionError(f"Failed to connect to SQLite database: {e}") from e

    def close(self) -> None:
        """Close database connection."""
        if self._conn:
            self._conn.close()
            self._conn = None

    def commit(self) -> None:
        """Commit current transaction."""
        try:
            self._connection().commit()
        except sqlite3.Error as e:
            raise DatabaseError(f"Failed to commit transaction: {e}") from e

    def rollback(self) -> None:
        """Rollback current transaction."""
        try:
            self._connection().rollback()
        except sqlite3.Error as e:
            raise DatabaseError(f"Failed to rollback transaction: {e}") from e

    def create_schema(self) -> None:
        """Create the highlights table from the bundled SQL file."""
        conn = self._connection()

        if not self._schema_file.exists():
            raise SchemaError(f"Schema file not found: {self._schema_file}")

        try:
            conn.executescript(self._schema_file.read_text())
            conn.commit()
        except sqlite3.Error as e:
            raise SchemaError(f"Failed to create schema: {e}") from e
        except OSError as e:
            raise SchemaError(f"Failed to read schema file: {e}") from e

    def get_tables(self) -> list[str]:
        """Get list of all tables in database."""
        try:
            cursor = self._connection().execute(
                "SELECT name FROM sqlite_master WHERE type='table' ORDER BY name"
            )
            return [row[0] for row in cursor.fetchall()]
        except sqlite3.Error as e:
            raise DatabaseError(f"Failed to get table list: {e}") from e

    def execute(self, query: str, params: tuple | None = None) -> Any:
        """Execute a query and return cursor."""
        conn = self._connection()
        try:
            return conn.execute(query, params or ())
        except sqlite3.IntegrityError as e:
            raise DBIntegrityError(f"Integrity constraint violation: {e}") from e
        except sqlite3.Error as e:
            raise DatabaseError(f"Query execution failed: {e}") from e

    def __repr__(self) -> str:
        """String representation."""
        status = "connected" if self._conn else "disconnected"
        return f"SQLiteAdapter(db_path={self.db_path}, status={status})"
