"""Shared constants for the koreader-highlights application.

For environment-based configuration (paths, database settings, etc.), use the env module:
    from common.env import env
    books_path = env.books_path()
"""

from pathlib import Path

# Default locations (overridable via CLI flags or .env)
DEFAULT_BOOKS_PATH = Path("/Volumes/Kindle/livros")
DEFAULT_DATABASE_PATH = Path("./highlights.db")

# KOReader writes one sidecar file per book inside its .sdr folder
METADATA_FILENAME = "metadata.epub.lua"

UNKNOWN_AUTHOR = "Unknown"

# Textual formats used by KOReader and by the CLI
DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
