"""Shared utilities for CLI commands."""

from rich.console import Console

from src.lending.core.services.database.db_session import DbSessionService
from src.lending.runtime.app_startup import configure_logging

console = Console()


def bootstrap() -> DbSessionService:
    """Configure logging and open the configured database."""
    configure_logging()
    return DbSessionService()
