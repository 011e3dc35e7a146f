"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import event, text
from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from src.lending.core.errors import LendingError
from src.lending.runtime.config.config_data import ConfigData
from src.lending.runtime.context import get_config


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """Turn on foreign key enforcement for every new SQLite connection."""

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, _connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(config: ConfigData) -> Engine:
    """Create an engine tuned for the configured backend."""
    db_config = config.database
    engine_kwargs: dict[str, Any] = {
        "echo": db_config.echo,
        "connect_args": _get_connect_args(config),
    }

    if not db_config.is_sqlite:
        engine_kwargs.update(
            {
                "pool_size": db_config.pool_size,
                "max_overflow": db_config.max_overflow,
                "pool_timeout": db_config.pool_timeout,
                "pool_recycle": db_config.pool_recycle,
                "pool_pre_ping": True,  # Validate connections before use
            }
        )

    engine = create_engine(db_config.connection_string, **engine_kwargs)
    if db_config.is_sqlite:
        enable_sqlite_foreign_keys(engine)
    return engine


def _get_connect_args(config: ConfigData) -> dict:
    """Get database-specific connection arguments."""
    connect_args: dict[str, Any] = {}

    if config.database.is_sqlite:
        connect_args.update(
            {
                "check_same_thread": False,
                "timeout": 20,  # Lock timeout
            }
        )
        if config.app.environment == "production":
            logger.warning(
                "SQLite is not recommended for production use. "
                "Consider PostgreSQL for better performance and reliability."
            )
    elif config.database.url.startswith("postgresql"):
        connect_args.update(
            {
                "application_name": f"{config.app.environment}_lending",
                "connect_timeout": 30,
            }
        )

    return connect_args


class DbSessionService:
    def __init__(self, engine: Engine | None = None):
        """Initialize the shared database engine and session factory."""
        if engine is None:
            main_config = get_config()
            logger.info(
                "Configuring database engine for environment: {}",
                main_config.app.environment,
            )
            engine = build_engine(main_config)
        self._engine = engine

    @property
    def engine(self) -> Engine:
        return self._engine

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,  # Prevent lazy loading issues
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Yield a session that commits on success and rolls back on error."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except LendingError:
            # Already logged by the service that raised it
            db.rollback()
            raise
        except Exception as e:
            db.rollback()
            logger.error(
                "Database transaction failed",
                extra={
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                },
            )
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.error(
                "Database health check failed",
                extra={
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                },
            )
            return False
