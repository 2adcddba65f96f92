"""Environment configuration interface for koreader-highlights.

This module provides a clean interface for accessing environment variables,
centralizing all environment variable access in one place.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from common.constants import DEFAULT_BOOKS_PATH, DEFAULT_DATABASE_PATH

# Load environment variables from .env file if it exists
load_dotenv()


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def books_path() -> Path:
        """Get the directory holding KOReader books and their .sdr folders.

        Returns:
            Books directory, defaults to /Volumes/Kindle/livros
        """
        return Path(os.getenv("BOOKS_PATH", str(DEFAULT_BOOKS_PATH)))

    @staticmethod
    def database_type() -> str:
        """Get the database type (sqlite or postgresql).

        Returns:
            Database type, defaults to 'sqlite'
        """
        return os.getenv("DATABASE_TYPE", "sqlite")

    @staticmethod
    def database_path() -> Path:
        """Get the SQLite database file path.

        Returns:
            Path to SQLite database file, defaults to ./highlights.db
        """
        return Path(os.getenv("DATABASE_PATH", str(DEFAULT_DATABASE_PATH)))

    @staticmethod
    def log_level() -> str:
        """Get the logging level name.

        Returns:
            Level name, defaults to 'INFO'
        """
        return os.getenv("LOG_LEVEL", "INFO").upper()

    @staticmethod
    def postgres_host() -> str:
        """Get PostgreSQL host.

        Returns:
            PostgreSQL host, defaults to 'localhost'
        """
        return os.getenv("POSTGRES_HOST", "localhost")

    @staticmethod
    def postgres_port() -> int:
        """Get PostgreSQL port.

        Returns:
            PostgreSQL port, defaults to 5432
        """
        return int(os.getenv("POSTGRES_PORT", "5432"))

    @staticmethod
    def postgres_database() -> str:
        """Get PostgreSQL database name.

        Returns:
            Database name, defaults to 'koreader_highlights'
        """
        return os.getenv("POSTGRES_DB", "koreader_highlights")

    @staticmethod
    def postgres_user() -> str:
        """Get PostgreSQL user.

        Returns:
            Database user, defaults to 'koreader'
        """
        return os.getenv("POSTGRES_USER", "koreader")

    @staticmethod
    def postgres_password() -> str:
        """Get PostgreSQL password.

        Returns:
            Database password, defaults to empty string
        """
        return os.getenv("POSTGRES_PASSWORD", "")

    @staticmethod
    def postgres_pool_size() -> int:
        """Get PostgreSQL connection pool size.

        Returns:
            Pool size, defaults to 1
        """
        return int(os.getenv("POSTGRES_POOL_SIZE", "1"))

    @staticmethod
    def postgres_pool_max_overflow() -> int:
        """Get PostgreSQL connection pool max overflow.

        Returns:
            Max overflow, defaults to 2
        """
        return int(os.getenv("POSTGRES_POOL_MAX_OVERFLOW", "2"))


# Singleton instance for convenient access
env = Environment()
