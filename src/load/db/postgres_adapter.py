"""PostgreSQL database adapter implementation.

Selected with DATABASE_TYPE=postgresql; requires the `postgresql` extra.
"""

from typing import Any

try:
    import psycopg
    from psycopg.rows import dict_row
    from psycopg_pool import ConnectionPool
except ImportError as e:
    raise ImportError(
        "PostgreSQL dependencies not installed. "
        'Install with: pip install -e ".[postgresql]"'
    ) from e

from .errors import ConnectionError as DBConnectionError
from .errors import DatabaseError, SchemaError
from .errors import IntegrityError as DBIntegrityError
from .interface import SCHEMA_DIR, DatabaseAdapter


class PostgreSQLAdapter(DatabaseAdapter):
    """PostgreSQL database adapter using a small psycopg connection pool."""

    def __init__(
        self,
        host: str = "localhost",
        port: int = 5432,
        database: str = "koreader_highlights",
        user: str = "koreader",
        password: str = "",
        pool_size: int = 1,
        pool_max_overflow: int = 2,
    ):
        """Initialize PostgreSQL adapter.

        Args:
            host: PostgreSQL server host
            port: PostgreSQL server port
            database: Database name
            user: Database user
            password: Database password
            pool_size: Minimum number of connections in pool
            pool_max_overflow: Maximum overflow connections beyond pool_size
        """
        self.host = host
        self.port = port
        self.database = database
        self.user = user
        self.password = password
        self.pool_size = pool_size
        self.pool_max_overflow = pool_max_overflow

        self._pool: ConnectionPool | None = None
        self._conn: Any = None  # psycopg.Connection
        self._schema_file = SCHEMA_DIR / "schema_postgresql.sql"

    def _connection(self) -> Any:
        if not self._conn:
            raise DatabaseError("No active connection")
        return self._conn

    def connect(self) -> None:
        """Open the pool and take one connection from it."""
        conninfo = (
            f"host={self.host} port={self.port} dbname={self.database} "
            f"user={self.user} password={self.password}"
        )
        try:
            self._pool = ConnectionPool(
                conninfo,
                min_size=self.pool_size,
                max_size=self.pool_size + self.pool_max_overflow,
                open=True,
            )
            self._conn = self._pool.getconn()
            self._conn.row_factory = dict_row
        except psycopg.Error as e:
            raise DBConnectionError(f"Failed to connect to PostgreSQL database: {e}") from e

    def close(self) -> None:
        """Return the connection and close the pool."""
        if self._conn and self._pool:
            self._pool.putconn(self._conn)
            self._conn = None

        if self._pool:
            self._pool.close()
            self._pool = None

    def commit(self) -> None:
        """Commit current transaction."""
        try:
            self._connection().commit()
        except psycopg.Error as e:
            raise DatabaseError(f"Failed to commit transaction: {e}") from e

    def rollback(self) -> None:
        """Rollback current transaction."""
        try:
            self._connection().rollback()
        except psycopg.Error as e:
            raise DatabaseError(f"Failed to rollback transaction: {e}") from e

    def create_schema(self) -> None:
        """Create the highlights table from the bundled SQL file."""
        conn = self._connection()

        if not self._schema_file.exists():
            raise SchemaError(f"Schema file not found: {self._schema_file}")

        try:
            with conn.cursor() as cursor:
                cursor.execute(self._schema_file.read_text())
            conn.commit()
        except psycopg.Error as e:
            raise SchemaError(f"Failed to create schema: {e}") from e
        except OSError as e:
            raise SchemaError(f"Failed to read schema file: {e}") from e

    def get_tables(self) -> list[str]:
        """Get list of all tables in the public schema."""
        query = """
            SELECT table_name
            FROM information_schema.tables
            WHERE table_schema = 'public'
            AND table_type = 'BASE TABLE'
            ORDER BY table_name
        """
        try:
            with self._connection().cursor() as cursor:
                cursor.execute(query)
                return [row["table_name"] for row in cursor.fetchall()]
        except psycopg.Error as e:
            raise DatabaseError(f"Failed to get table list: {e}") from e

    def execute(self, query: str, params: tuple | None = None) -> Any:
        """Execute a query and return cursor.

        Queries use SQLite-style `?` placeholders and are converted to `%s`.
        """
        conn = self._connection()
        try:
            cursor = conn.cursor()
            cursor.execute(query.replace("?", "%s"), params or None)
            return cursor
        except psycopg.errors.IntegrityError as e:
            raise DBIntegrityError(f"Integrity constraint violation: {e}") from e
        except psycopg.Error as e:
            raise DatabaseError(f"Query execution failed: {e}") from e

    def __repr__(self) -> str:
        """String representation."""
        status = "connected" if self._conn else "disconnected"
        return (
            f"PostgreSQLAdapter(host={self.host}, port={self.port}, "
            f"database={self.database}, status={status})"
        )
