"""Contract-style tests for use cases using RecordStorePort."""

from collections.abc import Mapping
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any
from unittest.mock import MagicMock

from bizdesk.application.ports.record_store import RecordStorePort
from bizdesk.application.use_cases.get_profit_loss_report import (
    GetProfitLossReportUseCase,
)
from bizdesk.application.use_cases.reconcile_overdue_orders import (
    ReconcileOverdueOrdersUseCase,
)
from bizdesk.domain.models import (
    Client,
    Expense,
    NewClient,
    NewExpense,
    NewOrder,
    Order,
)


class FakeRecordStore(RecordStorePort):
    """Fake store representing a remote backend with fixed snapshots."""

    def __init__(self, orders: list[Order], expenses: list[Expense]) -> None:
        self._orders = orders
        self._expenses = expenses
        self.updates: list[tuple[str, dict[str, Any]]] = []

    def list_clients(self) -> list[Client]:
        return []

    def insert_client(self, draft: NewClient) -> Client:
        raise NotImplementedError

    def update_client(self, client_id: str, changes: Mapping[str, Any]) -> Client:
        raise NotImplementedError

    def delete_client(self, client_id: str) -> None:
        raise NotImplementedError

    def list_orders(self) -> list[Order]:
        return list(self._orders)

    def insert_order(self, draft: NewOrder) -> Order:
        raise NotImplementedError

    def update_order(self, order_id: str, changes: Mapping[str, Any]) -> Order:
        self.updates.append((order_id, dict(changes)))
        return self._orders[0]

    def delete_order(self, order_id: str) -> None:
        raise NotImplementedError

    def list_expenses(self) -> list[Expense]:
        return list(self._expenses)

    def insert_expense(self, draft: NewExpense) -> Expense:
        raise NotImplementedError

    def update_expense(self, expense_id: str, changes: Mapping[str, Any]) -> Expense:
        raise NotImplementedError

    def delete_expense(self, expense_id: str) -> None:
        raise NotImplementedError


def _order(order_id: str, status: str = "pending") -> Order:
    moment = datetime(2024, 1, 5, tzinfo=timezone.utc)
    return Order(
        id=order_id,
        client_id="c1",
        title="Work",
        description="",
        deadline=moment,
        cost=Decimal("80"),
        status=status,
        payment_status="paid",
        created_at=moment,
    )


def test_profit_loss_accepts_any_record_store() -> None:
    store = FakeRecordStore(
        orders=[_order("o1")],
        expenses=[
            Expense(
                "e1",
                "Phone",
                Decimal("30"),
                datetime(2024, 1, 9, tzinfo=timezone.utc),
                "communication",
            )
        ],
    )

    report = GetProfitLossReportUseCase(store, logger=MagicMock()).execute(
        date(2024, 1, 1),
        date(2024, 1, 31),
    )

    assert report.net_profit == Decimal("50")


def test_reconcile_goes_through_update_order() -> None:
    """Status changes are only written through the store's update operation."""
    store = FakeRecordStore(
        orders=[_order("o1"), _order("o2", status="complete")],
        expenses=[],
    )

    ReconcileOverdueOrdersUseCase(store, logger=MagicMock()).run(
        now=datetime(2024, 2, 1, tzinfo=timezone.utc)
    )

    assert store.updates == [("o1", {"status": "overdue"})]
