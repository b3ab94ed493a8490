"""Tests for the Record Store factory and composition root."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine

from bizdesk.application.use_cases.record_service import RecordService
from bizdesk.infrastructure import container
from bizdesk.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from bizdesk.infrastructure.json_record_store import JsonFileRecordStore
from bizdesk.infrastructure.memory_record_store import InMemoryRecordStore
from bizdesk.infrastructure.record_store_factory import create_record_store
from bizdesk.infrastructure.settings import BusinessDeskSettings
from bizdesk.infrastructure.sqlalchemy_record_store import SqlAlchemyRecordStore


def test_memory_backend() -> None:
    store = create_record_store(BusinessDeskSettings(), logger=MagicMock())

    assert isinstance(store, InMemoryRecordStore)


def test_json_backend_uses_configured_path(tmp_path) -> None:
    settings = BusinessDeskSettings(backend="json", json_path=tmp_path / "d.json")

    store = create_record_store(settings, logger=MagicMock())

    assert isinstance(store, JsonFileRecordStore)
    assert store.path == tmp_path / "d.json"


def test_json_backend_requires_path() -> None:
    with pytest.raises(RuntimeError):
        create_record_store(BusinessDeskSettings(backend="json"), logger=MagicMock())


def test_sqlalchemy_backend_creates_schema(tmp_path) -> None:
    engine = create_engine(f"sqlite:///{tmp_path / 'desk.db'}", future=True)
    settings = BusinessDeskSettings(backend="sqlalchemy")

    store = create_record_store(
        settings,
        db_port=SqlAlchemyDatabaseEngineAdapter(engine),
        logger=MagicMock(),
    )

    assert isinstance(store, SqlAlchemyRecordStore)
    assert store.list_orders() == []


def test_unsupported_backend_raises_value_error() -> None:
    with pytest.raises(ValueError, match="redis"):
        create_record_store(BusinessDeskSettings(backend="redis"), logger=MagicMock())


def test_cascade_policy_is_forwarded() -> None:
    settings = BusinessDeskSettings(cascade_client_orders=False)

    store = create_record_store(settings, logger=MagicMock())

    assert store._cascade_client_orders is False


def test_container_builds_service_and_policy(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    settings = BusinessDeskSettings(revenue_rule="amount_paid")

    store = container.build_record_store(settings=settings)
    service = container.build_record_service(store)
    policy = container.build_revenue_policy(settings)

    assert isinstance(store, InMemoryRecordStore)
    assert isinstance(service, RecordService)
    assert policy.rule == "amount_paid"
