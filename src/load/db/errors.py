"""Exceptions raised by the highlights database adapters.

Backend-specific errors (sqlite3, psycopg) are wrapped in these so callers
only ever handle one hierarchy.
"""


class DatabaseError(Exception):
    """Base exception for database operations."""

    pass


class ConnectionError(DatabaseError):
    """The highlights database could not be opened."""

    pass


class IntegrityError(DatabaseError):
    """A constraint other than the handled duplicate key was violated."""

    pass


class SchemaError(DatabaseError):
    """The highlights schema could not be read or applied."""

    pass
