"""Tests for the RecordService write path."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

from bizdesk.application.use_cases.record_service import RecordService
from bizdesk.domain.errors import (
    InvalidStatusTransitionError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from bizdesk.domain.models import NewClient, NewExpense, NewOrder
from bizdesk.infrastructure.memory_record_store import InMemoryRecordStore

MOMENT = datetime(2024, 2, 1, tzinfo=timezone.utc)


def _service() -> tuple[RecordService, InMemoryRecordStore, MagicMock]:
    counter = iter(range(1, 100))
    store = InMemoryRecordStore(
        clock=lambda: MOMENT,
        id_factory=lambda: f"id-{next(counter)}",
    )
    logger = MagicMock()
    return RecordService(store, logger=logger), store, logger


def _new_order(client_id: str, cost: str = "100") -> NewOrder:
    return NewOrder(
        client_id=client_id,
        title="Logo",
        deadline=datetime(2024, 3, 1, tzinfo=timezone.utc),
        cost=Decimal(cost),
    )


def test_create_client_assigns_id_and_timestamp() -> None:
    service, store, logger = _service()

    result = service.create_client(NewClient(name="Acme", email="a@acme.io"))

    assert result.ok
    assert result.value.id == "id-1"
    assert result.value.created_at == MOMENT
    assert store.list_clients() == [result.value]
    logger.info.assert_called()


def test_create_client_rejects_bad_email_without_writing() -> None:
    service, store, logger = _service()

    result = service.create_client(NewClient(name="Acme", email="nope"))

    assert not result.ok
    assert isinstance(result.error, ValidationError)
    assert result.value is None
    assert store.list_clients() == []
    logger.warning.assert_called_once()


def test_new_orders_start_pending() -> None:
    service, _, _ = _service()
    client = service.create_client(NewClient("Acme", "a@acme.io")).unwrap()

    order = service.create_order(_new_order(client.id)).unwrap()

    assert order.status == "pending"
    assert order.payment_status == "unpaid"


def test_update_client_rejects_immutable_fields() -> None:
    service, _, _ = _service()
    client = service.create_client(NewClient("Acme", "a@acme.io")).unwrap()

    result = service.update_client(client.id, {"created_at": MOMENT})

    assert isinstance(result.error, ValidationError)


def test_update_missing_record_is_not_found() -> None:
    service, _, _ = _service()

    result = service.update_expense("missing", {"title": "x"})

    assert isinstance(result.error, NotFoundError)


def test_set_order_status_follows_lifecycle() -> None:
    service, _, _ = _service()
    client = service.create_client(NewClient("Acme", "a@acme.io")).unwrap()
    order = service.create_order(_new_order(client.id)).unwrap()

    completed = service.set_order_status(order.id, "complete")
    reopened = service.set_order_status(order.id, "pending")

    assert completed.value.status == "complete"
    assert isinstance(reopened.error, InvalidStatusTransitionError)


def test_process_payment_updates_amount_and_status() -> None:
    service, _, _ = _service()
    client = service.create_client(NewClient("Acme", "a@acme.io")).unwrap()
    order = service.create_order(_new_order(client.id, cost="100")).unwrap()

    partial = service.process_payment(order.id, Decimal("30")).unwrap()
    paid = service.process_payment(order.id, Decimal("70")).unwrap()
    extra = service.process_payment(order.id, Decimal("1"))

    assert (partial.amount_paid, partial.payment_status) == (Decimal("30"), "partial")
    assert (paid.amount_paid, paid.payment_status) == (Decimal("100"), "paid")
    assert isinstance(extra.error, ValidationError)


def test_delete_client_cascades_to_orders() -> None:
    """Orders of a deleted client disappear from later listings."""
    service, _, _ = _service()
    acme = service.create_client(NewClient("Acme", "a@acme.io")).unwrap()
    globex = service.create_client(NewClient("Globex", "g@globex.io")).unwrap()
    service.create_order(_new_order(acme.id))
    kept = service.create_order(_new_order(globex.id)).unwrap()

    assert service.delete_client(acme.id).ok

    assert service.list_orders().value == [kept]


def test_expense_lifecycle() -> None:
    service, _, _ = _service()
    draft = NewExpense("Figma", Decimal("12"), MOMENT, "tools")

    expense = service.create_expense(draft).unwrap()
    updated = service.update_expense(expense.id, {"amount": Decimal("15")}).unwrap()
    rejected = service.update_expense(expense.id, {"amount": Decimal("-1")})

    assert updated.amount == Decimal("15")
    assert isinstance(rejected.error, ValidationError)
    assert service.delete_expense(expense.id).ok
    assert service.list_expenses().value == []


def test_store_errors_become_failures() -> None:
    """Store failures are reported as results, not raised."""
    store = MagicMock()
    store.list_orders.side_effect = StoreError("disk on fire")
    service = RecordService(store, logger=MagicMock())

    result = service.list_orders()

    assert not result.ok
    assert isinstance(result.error, StoreError)


def test_update_order_cannot_lower_amount_paid() -> None:
    """A recorded payment is only ever raised, never rolled back."""
    service, store, _ = _service()
    client = service.create_client(NewClient("Acme", "a@acme.io")).unwrap()
    order = service.create_order(_new_order(client.id, cost="100")).unwrap()
    service.process_payment(order.id, Decimal("60"))

    lowered = service.update_order(order.id, {"amount_paid": Decimal("10")})
    cleared = service.update_order(order.id, {"amount_paid": None})

    assert isinstance(lowered.error, ValidationError)
    assert lowered.error.field == "amount_paid"
    assert isinstance(cleared.error, ValidationError)
    assert store.list_orders()[0].amount_paid == Decimal("60")
