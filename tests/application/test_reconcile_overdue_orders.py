"""Tests for the ReconcileOverdueOrdersUseCase."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from bizdesk.application.use_cases.reconcile_overdue_orders import (
    ReconcileOverdueOrdersUseCase,
)
from bizdesk.domain.errors import StoreError
from bizdesk.domain.models import Order
from bizdesk.infrastructure.memory_record_store import InMemoryRecordStore

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


def _order(order_id: str, status: str, deadline: datetime) -> Order:
    return Order(
        id=order_id,
        client_id="c1",
        title="Work",
        description="",
        deadline=deadline,
        cost=Decimal("100"),
        status=status,
        payment_status="unpaid",
        created_at=NOW - timedelta(days=10),
    )


def test_run_marks_late_pending_orders_overdue() -> None:
    """Late pending orders become overdue; complete ones stay complete."""
    yesterday = NOW - timedelta(days=1)
    store = InMemoryRecordStore(
        orders=[
            _order("late", "pending", yesterday),
            _order("done", "complete", yesterday),
            _order("future", "pending", NOW + timedelta(days=1)),
        ]
    )
    logger = MagicMock()

    result = ReconcileOverdueOrdersUseCase(store, logger=logger).run(now=NOW)

    statuses = {order.id: order.status for order in store.list_orders()}
    assert statuses == {"late": "overdue", "done": "complete", "future": "pending"}
    assert result.checked_count == 3
    assert result.updated_ids == ["late"]
    assert result.updated_count == 1
    logger.info.assert_called_once()


def test_run_is_idempotent() -> None:
    store = InMemoryRecordStore(
        orders=[_order("late", "pending", NOW - timedelta(days=1))]
    )
    use_case = ReconcileOverdueOrdersUseCase(store, logger=MagicMock())

    use_case.run(now=NOW)
    second = use_case.run(now=NOW)

    assert second.updated_count == 0


def test_run_propagates_store_errors() -> None:
    store = MagicMock()
    store.list_orders.side_effect = StoreError("offline")

    with pytest.raises(StoreError):
        ReconcileOverdueOrdersUseCase(store, logger=MagicMock()).run(now=NOW)


def test_run_accepts_a_naive_now() -> None:
    store = InMemoryRecordStore(
        orders=[_order("late", "pending", NOW - timedelta(days=1))]
    )

    result = ReconcileOverdueOrdersUseCase(store, logger=MagicMock()).run(
        now=NOW.replace(tzinfo=None)
    )

    assert result.updated_ids == ["late"]
