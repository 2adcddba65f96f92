"""Abstract database adapter interface.

Defines the operations the highlights loader needs, implemented by the SQLite
and PostgreSQL adapters. Queries are written with `?` placeholders; adapters
translate them when their driver expects something else.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

# Type alias for database rows
Row = dict[str, Any]

SCHEMA_DIR = Path(__file__).parent


class DatabaseAdapter(ABC):
    """Abstract database adapter interface."""

    @abstractmethod
    def connect(self) -> None:
        """Establish database connection.

        Raises:
            ConnectionError: If connection fails
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Close database connection."""
        pass

    @abstractmethod
    def commit(self) -> None:
        """Commit current transaction.

        Raises:
            DatabaseError: If commit fails
        """
        pass

    @abstractmethod
    def rollback(self) -> None:
        """Rollback current transaction.

        Raises:
            DatabaseError: If rollback fails
        """
        pass

    @abstractmethod
    def create_schema(self) -> None:
        """Create the highlights table and indexes if they do not exist.

        Raises:
            SchemaError: If schema creation fails
        """
        pass

    @abstractmethod
    def get_tables(self) -> list[str]:
        """Get list of all tables in database."""
        pass

    @abstractmethod
    def execute(self, query: str, params: tuple | None = None) -> Any:
        """Execute a query and return the cursor.

        Args:
            query: SQL query with `?` placeholders
            params: Query parameters (optional)

        Returns:
            Database cursor (its rowcount reports affected rows)

        Raises:
            DatabaseError: If execution fails
            IntegrityError: If integrity constraint violated
        """
        pass

    def fetchone(self, query: str, params: tuple | None = None) -> Row | None:
        """Execute query and fetch one result as dictionary."""
        row = self.execute(query, params).fetchone()
        return dict(row) if row is not None else None

    def fetchall(self, query: str, params: tuple | None = None) -> list[Row]:
        """Execute query and fetch all results as list of dictionaries."""
        return [dict(row) for row in self.execute(query, params).fetchall()]

    def fetchscalar(self, query: str, params: tuple | None = None) -> Any:
        """Execute query and return first column of first row.

        Useful for COUNT(*) style queries.
        """
        result = self.fetchone(query, params)
        if result is None:
            return None
        return next(iter(result.values()))

    def __enter__(self):
        """Context manager entry."""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit: commit on success, roll back on error."""
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        self.close()
        return False
