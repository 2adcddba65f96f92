"""Logging utilities with rich console output.

Usage:
    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Scanning books...")
    logger.warning("Skipping broken metadata file")
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from common.env import env

# Global console instances for consistent output
console = Console()
error_console = Console(stderr=True)

# Names of loggers configured by get_logger
_app_loggers: set[str] = set()


def _rich_handler() -> RichHandler:
    handler = RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
        markup=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def get_logger(name: str, level: str | None = None) -> logging.Logger:
    """Get a configured logger with rich output.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If None, uses environment variable LOG_LEVEL or defaults to INFO.

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid adding multiple handlers if logger already configured
    if logger.handlers:
        return logger

    logger.setLevel((level or env.log_level()).upper())
    logger.addHandler(_rich_handler())
    _app_loggers.add(name)

    # Propagate so pytest's caplog can see records
    logger.propagate = True

    return logger


def set_level(level: str) -> None:
    """Apply a level to every logger created through get_logger."""
    for name in _app_loggers:
        logging.getLogger(name).setLevel(level.upper())


def setup_logging(level: str | None = None, log_file: str | None = None) -> None:
    """Setup logging configuration for the entire application.

    This should be called once at the application entry point (CLI).
    Console output stays on the per-module rich handlers; the root logger
    only receives the optional file handler.

    Args:
        level: Logging level for all modules. If None, uses LOG_LEVEL or INFO.
        log_file: Optional file path to also log to a file
    """
    level = (level or env.log_level()).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)

    set_level(level)


def progress(message: str) -> None:
    """Print a progress message without the logger prefix."""
    console.print(message)


def success(message: str) -> None:
    """Print a success message with a green checkmark."""
    console.print(f"[green]✓[/green] {message}")


def warning(message: str) -> None:
    """Print a warning message with a yellow warning icon."""
    console.print(f"[yellow]⚠[/yellow] {message}")


def error(message: str) -> None:
    """Print an error message with a red X icon to stderr."""
    error_console.print(f"[red]✗[/red] {message}")
