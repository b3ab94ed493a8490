"""Database infrastructure for the relational Record Store.

This module exposes helpers to create and reuse the SQLAlchemy engine for the
records database. The URL comes from ``BIZDESK_DB_URL`` (a ``.env`` file is
honored).
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from bizdesk.application.ports.database import DatabaseEnginePort


DB_URL_ENV = "BIZDESK_DB_URL"


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Server databases get a small pool with health checks; SQLite files use
    the dialect's default pool.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance.
    """
    if make_url(db_url).get_backend_name() == "sqlite":
        return create_engine(db_url, future=True)
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_records_engine: Optional[Engine] = None


def get_records_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the records database.

    Returns:
        Engine: Lazily initialized engine connected to the records database.
    """
    global _records_engine
    if _records_engine is None:
        db_url = _get_env_var(DB_URL_ENV)
        _records_engine = _create_engine(db_url)
    return _records_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by SQLAlchemy engines.

    The adapter hides configuration details (environment variables, pooling)
    behind the port. An explicit engine can be injected, e.g. for tests.
    """

    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine

    def get_records_engine(self) -> Engine:
        """Get the engine for the records database.

        Returns:
            Engine: SQLAlchemy engine connected to the records database.
        """
        if self._engine is not None:
            return self._engine
        return get_records_engine()


__all__ = [
    "DB_URL_ENV",
    "get_records_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
