"""Tests for the in-memory Record Store."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from bizdesk.domain.errors import NotFoundError, ValidationError
from bizdesk.domain.models import NewClient, NewExpense, NewOrder
from bizdesk.infrastructure.memory_record_store import InMemoryRecordStore

MOMENT = datetime(2024, 4, 1, 9, 30, tzinfo=timezone.utc)


def _store(**kwargs) -> InMemoryRecordStore:
    counter = iter(range(1, 100))
    return InMemoryRecordStore(
        clock=lambda: MOMENT,
        id_factory=lambda: f"id-{next(counter)}",
        **kwargs,
    )


def _draft_order(client_id: str) -> NewOrder:
    return NewOrder(
        client_id=client_id,
        title="Logo",
        deadline=datetime(2024, 5, 1),
        cost=Decimal("250"),
    )


def test_insert_assigns_store_fields_and_lists_in_insertion_order() -> None:
    store = _store()

    first = store.insert_client(NewClient("Acme", "a@acme.io"))
    second = store.insert_client(NewClient("Globex", "g@globex.io"))

    assert (first.id, second.id) == ("id-1", "id-2")
    assert first.created_at == MOMENT
    assert store.list_clients() == [first, second]


def test_insert_order_starts_pending_with_utc_deadline() -> None:
    store = _store()

    order = store.insert_order(_draft_order("c1"))

    assert order.status == "pending"
    assert order.deadline.tzinfo == timezone.utc


def test_update_returns_persisted_record() -> None:
    store = _store()
    expense = store.insert_expense(
        NewExpense("Figma", Decimal("12"), MOMENT, "tools")
    )
    later = datetime(2024, 4, 2, 12, 0, tzinfo=timezone(timedelta(hours=2)))

    updated = store.update_expense(expense.id, {"notes": "annual", "date": later})

    assert updated.notes == "annual"
    assert updated.date == later
    assert updated.date.tzinfo == timezone.utc
    assert store.list_expenses() == [updated]


def test_update_and_delete_missing_ids_raise_not_found() -> None:
    store = _store()

    with pytest.raises(NotFoundError):
        store.update_order("missing", {"title": "x"})
    with pytest.raises(NotFoundError):
        store.delete_expense("missing")
    with pytest.raises(NotFoundError):
        store.delete_client("missing")


def test_update_rejects_unknown_fields() -> None:
    store = _store()
    client = store.insert_client(NewClient("Acme", "a@acme.io"))

    with pytest.raises(ValidationError):
        store.update_client(client.id, {"clientId": "c9"})


def test_delete_client_cascades_by_default() -> None:
    store = _store()
    acme = store.insert_client(NewClient("Acme", "a@acme.io"))
    globex = store.insert_client(NewClient("Globex", "g@globex.io"))
    store.insert_order(_draft_order(acme.id))
    kept = store.insert_order(_draft_order(globex.id))

    store.delete_client(acme.id)

    assert store.list_clients() == [globex]
    assert store.list_orders() == [kept]


def test_delete_client_without_cascade_leaves_dangling_orders() -> None:
    store = _store(cascade_client_orders=False)
    acme = store.insert_client(NewClient("Acme", "a@acme.io"))
    order = store.insert_order(_draft_order(acme.id))

    store.delete_client(acme.id)

    assert store.list_orders() == [order]


def test_list_returns_snapshots() -> None:
    store = _store()
    snapshot = store.list_clients()

    store.insert_client(NewClient("Acme", "a@acme.io"))

    assert snapshot == []
