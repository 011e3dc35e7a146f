"""Schema management for the lending tables."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from src.lending.core.services.database.db_session import build_engine
from src.lending.runtime.context import get_config


class DbManageService:
    def __init__(self, engine: Engine | None = None):
        self._engine = engine or build_engine(get_config())

    def create_all(self) -> None:
        """Create all database tables."""
        from src.lending.entities import (  # noqa: F401
            BookTable,
            CategoryTable,
            LendbookTable,
            UserTable,
        )

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")
