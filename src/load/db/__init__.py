"""Database abstraction layer for koreader-highlights.

Example:
    >>> from load.db import DatabaseConfig, create_database
    >>>
    >>> config = DatabaseConfig(db_type="sqlite", db_path="highlights.db")
    >>> with create_database(config) as adapter:
    ...     adapter.create_schema()
"""

from .errors import (
    ConnectionError,
    DatabaseError,
    IntegrityError,
    SchemaError,
)
from .factory import DatabaseConfig, DatabaseType, config_from_env, create_database, get_adapter
from .interface import DatabaseAdapter, Row

__all__ = [
    # Factory
    "DatabaseConfig",
    "DatabaseType",
    "config_from_env",
    "create_database",
    "get_adapter",
    # Interface
    "DatabaseAdapter",
    "Row",
    # Exceptions
    "DatabaseError",
    "ConnectionError",
    "IntegrityError",
    "SchemaError",
]
