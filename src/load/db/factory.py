"""Database factory for creating database adapters.

The backend is chosen by DatabaseConfig.db_type: SQLite (default) stores
highlights in a local file, PostgreSQL is available with the `postgresql`
extra.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from common.env import env

from .interface import DatabaseAdapter
from .sqlite_adapter import SQLiteAdapter


class DatabaseType(str, Enum):
    """Supported database types."""

    SQLITE = "sqlite"
    POSTGRESQL = "postgresql"


@dataclass
class DatabaseConfig:
    """Database configuration container.

    Attributes:
        db_type: Type of database ('sqlite' or 'postgresql')
        db_path: Path to SQLite database file (for SQLite only)
        host: PostgreSQL host (for PostgreSQL only)
        port: PostgreSQL port (for PostgreSQL only)
        database: PostgreSQL database name (for PostgreSQL only)
        user: PostgreSQL username (for PostgreSQL only)
        password: PostgreSQL password (for PostgreSQL only)
    """

    db_type: DatabaseType | str
    # SQLite-specific
    db_path: Path | None = None
    # PostgreSQL-specific
    host: str | None = None
    port: int | None = None
    database: str | None = None
    user: str | None = None
    password: str | None = None
    pool_size: int = 1
    pool_max_overflow: int = 2

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.db_type, str):
            try:
                self.db_type = DatabaseType(self.db_type.lower())
            except ValueError as e:
                raise ValueError(
                    f"Unsupported database type: {self.db_type}. "
                    f"Must be one of: {', '.join(t.value for t in DatabaseType)}"
                ) from e

        if self.db_type == DatabaseType.SQLITE:
            if self.db_path is None:
                raise ValueError("db_path is required for SQLite")
            self.db_path = Path(self.db_path)

        elif self.db_type == DatabaseType.POSTGRESQL:
            if not all([self.host, self.database, self.user]):
                raise ValueError("host, database, and user are required for PostgreSQL")
            if self.port is None:
                self.port = 5432

    def describe(self) -> str:
        """Connection target for progress output, without the password."""
        if self.db_type == DatabaseType.POSTGRESQL:
            return f"postgresql://{self.user}@{self.host}:{self.port}/{self.database}"
        return str(self.db_path)


def create_database(config: DatabaseConfig) -> DatabaseAdapter:
    """Factory function to create appropriate database adapter.

    Args:
        config: Database configuration

    Returns:
        Database adapter instance (not yet connected)

    Raises:
        ImportError: If PostgreSQL is requested without psycopg installed
    """
    if config.db_type == DatabaseType.POSTGRESQL:
        # Import here to avoid requiring psycopg when not using PostgreSQL
        from .postgres_adapter import PostgreSQLAdapter

        return PostgreSQLAdapter(
            host=config.host,
            port=config.port,
            database=config.database,
            user=config.user,
            password=config.password,
            pool_size=config.pool_size,
            pool_max_overflow=config.pool_max_overflow,
        )

    return SQLiteAdapter(config.db_path)


def config_from_env(db_path: Path | None = None) -> DatabaseConfig:
    """Build a DatabaseConfig from DATABASE_TYPE and the related variables.

    Args:
        db_path: SQLite file to use instead of DATABASE_PATH

    Returns:
        Database configuration
    """
    if env.database_type().lower() == DatabaseType.POSTGRESQL.value:
        return DatabaseConfig(
            db_type=DatabaseType.POSTGRESQL,
            host=env.postgres_host(),
            port=env.postgres_port(),
            database=env.postgres_database(),
            user=env.postgres_user(),
            password=env.postgres_password(),
            pool_size=env.postgres_pool_size(),
            pool_max_overflow=env.postgres_pool_max_overflow(),
        )

    return DatabaseConfig(db_type=DatabaseType.SQLITE, db_path=db_path or env.database_path())


def get_adapter(db_path: Path | None = None) -> DatabaseAdapter:
    """Get a database adapter using environment configuration.

    Example:
        >>> with get_adapter(Path("highlights.db")) as adapter:
        ...     adapter.create_schema()
    """
    return create_database(config_from_env(db_path))
