"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import Engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, create_engine

from crm_api.runtime.config.config_data import ConfigData
from crm_api.runtime.context import get_config

SQLITE_BUSY_TIMEOUT = 20


def _connect_args(config: ConfigData) -> dict[str, Any]:
    database = config.database
    if database.is_sqlite:
        if config.app.environment == "production":
            logger.warning("Running on SQLite in production; prefer PostgreSQL")
        # sessions are used from threadpool workers
        return {"check_same_thread": False, "timeout": SQLITE_BUSY_TIMEOUT}
    if database.url.startswith("postgresql"):
        return {"application_name": config.app.name, "connect_timeout": 30}
    return {}


def _pool_options(config: ConfigData) -> dict[str, Any]:
    database = config.database
    if database.is_sqlite:
        return {}
    return {
        "pool_size": database.pool_size,
        "max_overflow": database.max_overflow,
        "pool_timeout": database.pool_timeout,
        "pool_recycle": database.pool_recycle,
    }


class DbSessionService:
    """Owns the engine; hands out sessions to requests, the CLI and tests.

    Args:
        engine: use this engine instead of building one from configuration
    """

    def __init__(self, engine: Engine | None = None):
        self._engine = engine if engine is not None else self._build_engine(get_config())

    @staticmethod
    def _build_engine(config: ConfigData) -> Engine:
        logger.info("Creating database engine for {} environment", config.app.environment)
        return create_engine(
            config.database.url,
            echo=config.database.echo,
            pool_pre_ping=True,
            connect_args=_connect_args(config),
            **_pool_options(config),
        )

    @property
    def engine(self) -> Engine:
        return self._engine

    def create_all(self) -> None:
        """Create the customers and users tables when missing."""
        from crm_api.entities.customer import CustomerTable  # noqa: F401
        from crm_api.entities.user import UserTable  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Account tables ready")

    def get_session(self) -> Session:
        return Session(self._engine, expire_on_commit=False)

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Yield a session that commits on success and rolls back on error."""
        session = self.get_session()
        try:
            yield session
            session.commit()
        except Exception as exc:
            session.rollback()
            logger.bind(error_type=type(exc).__name__).error("Rolled back database transaction: {}", exc)
            raise
        finally:
            session.close()

    def health_check(self) -> bool:
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            logger.bind(error_type=type(exc).__name__).error("Database health check failed: {}", exc)
            return False
        return True
