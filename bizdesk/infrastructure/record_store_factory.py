"""Factory helpers to select the Record Store backend."""

from bizdesk.application.ports.database import DatabaseEnginePort
from bizdesk.application.ports.record_store import RecordStorePort
from bizdesk.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from bizdesk.infrastructure.json_record_store import JsonFileRecordStore
from bizdesk.infrastructure.logging.logger import get_app_logger
from bizdesk.infrastructure.memory_record_store import InMemoryRecordStore
from bizdesk.infrastructure.settings import BusinessDeskSettings
from bizdesk.infrastructure.sqlalchemy_record_store import (
    SqlAlchemyRecordStore,
)


def create_record_store(
    settings: BusinessDeskSettings,
    db_port: DatabaseEnginePort | None = None,
    logger=None,
) -> RecordStorePort:
    """Return a Record Store implementation based on configuration.

    Args:
        settings: Backend selection and store policies.
        db_port: Optional port providing the records engine (SQL backend).
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        RecordStorePort: Concrete store implementation.

    Raises:
        ValueError: If the configured backend is not supported.
        RuntimeError: If the json backend has no file path.
    """
    resolved_logger = logger or get_app_logger()
    backend = settings.backend.strip().lower()
    cascade = settings.cascade_client_orders

    if backend == "memory":
        resolved_logger.info("Using in-memory record store")
        return InMemoryRecordStore(cascade_client_orders=cascade)

    if backend == "json":
        if settings.json_path is None:
            raise RuntimeError("JSON backend requires a BIZDESK_JSON_PATH value.")
        resolved_logger.info(f"Using JSON record store at {settings.json_path}")
        return JsonFileRecordStore(
            settings.json_path,
            cascade_client_orders=cascade,
        )

    if backend == "sqlalchemy":
        store = SqlAlchemyRecordStore(
            db_port or SqlAlchemyDatabaseEngineAdapter(),
            cascade_client_orders=cascade,
        )
        store.ensure_schema()
        resolved_logger.info("Using SQLAlchemy record store")
        return store

    raise ValueError(
        "Unsupported record store backend: "
        f"{settings.backend}. Expected memory, json or sqlalchemy."
    )


__all__ = ["create_record_store"]
