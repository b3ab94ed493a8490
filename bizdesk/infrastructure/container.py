"""Composition root for wiring infrastructure adapters."""

from bizdesk.application.ports.database import DatabaseEnginePort
from bizdesk.application.ports.record_store import RecordStorePort
from bizdesk.application.use_cases.record_service import RecordService
from bizdesk.domain.services.revenue import RevenuePolicy
from bizdesk.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from bizdesk.infrastructure.logging.logger import get_app_logger
from bizdesk.infrastructure.record_store_factory import create_record_store
from bizdesk.infrastructure.settings import BusinessDeskSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_record_store(
    db_port: DatabaseEnginePort | None = None,
    settings: BusinessDeskSettings | None = None,
) -> RecordStorePort:
    """Return the configured Record Store."""
    resolved_settings = settings or BusinessDeskSettings.from_env()
    resolved_db = None
    if resolved_settings.backend == "sqlalchemy":
        resolved_db = db_port or build_database_adapter()
    return create_record_store(
        resolved_settings,
        db_port=resolved_db,
        logger=get_app_logger(),
    )


def build_revenue_policy(
    settings: BusinessDeskSettings | None = None,
) -> RevenuePolicy:
    """Return the revenue policy shared by every report."""
    resolved_settings = settings or BusinessDeskSettings.from_env()
    return RevenuePolicy(rule=resolved_settings.revenue_rule)


def build_record_service(
    record_store: RecordStorePort | None = None,
) -> RecordService:
    """Return the validated CRUD service over the configured store."""
    return RecordService(
        record_store or build_record_store(),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_record_store",
    "build_revenue_policy",
    "build_record_service",
]
