"""Tests for the dashboard and report use cases."""

from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from bizdesk.application.use_cases.get_calendar_events import (
    GetCalendarEventsUseCase,
)
from bizdesk.application.use_cases.get_client_report import (
    GetClientReportUseCase,
)
from bizdesk.application.use_cases.get_dashboard_summary import (
    GetDashboardSummaryUseCase,
)
from bizdesk.application.use_cases.get_expense_report import (
    ExpenseFilter,
    GetExpenseReportUseCase,
)
from bizdesk.application.use_cases.get_order_report import (
    GetOrderReportUseCase,
    OrderFilter,
)
from bizdesk.application.use_cases.get_profit_loss_report import (
    GetProfitLossReportUseCase,
)
from bizdesk.domain.errors import StoreError
from bizdesk.domain.models import Client, Expense, Order
from bizdesk.domain.services.revenue import RevenuePolicy
from bizdesk.infrastructure.memory_record_store import InMemoryRecordStore


def _at(month: int, day: int = 10) -> datetime:
    return datetime(2024, month, day, tzinfo=timezone.utc)


CLIENTS = [
    Client("c1", "Acme", "a@acme.io", "", "Bank Transfer", "", _at(1, 1)),
    Client("c2", "Globex", "g@globex.io", "", "PayPal", "", _at(1, 1)),
]

ORDERS = [
    Order("o1", "c1", "Logo", "", _at(2, 1), Decimal("1000"), "complete", "paid", _at(1)),
    Order(
        "o2", "c1", "Website", "", _at(3, 1), Decimal("500"), "pending", "partial",
        _at(2), amount_paid=Decimal("100"),
    ),
    Order("o3", "c2", "Flyer", "", _at(3, 20), Decimal("200"), "overdue", "unpaid", _at(3)),
    Order("o4", "gone", "Banner", "", _at(3, 25), Decimal("50"), "pending", "paid", _at(3, 15)),
]

EXPENSES = [
    Expense("e1", "Figma", Decimal("50"), _at(1), "tools"),
    Expense("e2", "Train", Decimal("10"), _at(3), "travel", "client visit"),
    Expense("e3", "Adobe", Decimal("25"), _at(2), "tools"),
]


def _store() -> InMemoryRecordStore:
    return InMemoryRecordStore(clients=CLIENTS, orders=ORDERS, expenses=EXPENSES)


def test_dashboard_summary_totals_and_series() -> None:
    now = datetime(2024, 3, 22, tzinfo=timezone.utc)

    summary = GetDashboardSummaryUseCase(_store(), logger=MagicMock()).execute(now=now)

    assert summary.total_revenue == Decimal("1300")
    assert summary.total_expenses == Decimal("85")
    assert summary.net_profit == Decimal("1215")
    assert summary.active_clients == 2
    assert summary.total_orders == 4
    assert [bucket.month for bucket in summary.monthly] == [1, 2, 3]
    assert [entry.client_id for entry in summary.top_clients] == ["c1", "gone"]
    assert summary.status_breakdown == {"pending": 2, "complete": 1, "overdue": 1}
    assert [row.order.id for row in summary.overdue_orders] == ["o2", "o3"]
    assert summary.overdue_orders[1].client_name == "Globex"


def test_dashboard_uses_the_injected_policy() -> None:
    summary = GetDashboardSummaryUseCase(
        _store(),
        revenue_policy=RevenuePolicy("amount_paid"),
        logger=MagicMock(),
    ).execute(now=_at(1))

    assert summary.total_revenue == Decimal("1150")


def test_dashboard_propagates_store_errors() -> None:
    store = MagicMock()
    store.list_clients.side_effect = StoreError("offline")

    with pytest.raises(StoreError):
        GetDashboardSummaryUseCase(store, logger=MagicMock()).execute()


def test_dashboard_accepts_a_naive_now() -> None:
    summary = GetDashboardSummaryUseCase(_store(), logger=MagicMock()).execute(
        now=datetime(2024, 3, 22)
    )

    assert [row.order.id for row in summary.overdue_orders] == ["o2", "o3"]


@pytest.mark.parametrize(
    "run_report",
    [
        lambda store: GetProfitLossReportUseCase(store, logger=MagicMock()).execute(
            date(2024, 1, 1), date(2024, 3, 31)
        ),
        lambda store: GetClientReportUseCase(store, logger=MagicMock()).execute(),
        lambda store: GetOrderReportUseCase(store, logger=MagicMock()).execute(),
        lambda store: GetExpenseReportUseCase(store, logger=MagicMock()).execute(),
        lambda store: GetCalendarEventsUseCase(store, logger=MagicMock()).execute(
            2024, 3
        ),
    ],
)
def test_reports_raise_store_errors_instead_of_empty_results(run_report) -> None:
    store = MagicMock()
    store.list_clients.side_effect = StoreError("offline")
    store.list_orders.side_effect = StoreError("offline")
    store.list_expenses.side_effect = StoreError("offline")

    with pytest.raises(StoreError):
        run_report(store)


def test_profit_loss_report_for_quarter() -> None:
    report = GetProfitLossReportUseCase(_store(), logger=MagicMock()).execute(
        date(2024, 1, 1),
        date(2024, 3, 31),
    )

    assert report.total_revenue == Decimal("1300")
    assert report.total_expenses == Decimal("85")
    assert report.net_profit == Decimal("1215")
    assert [bucket.revenue for bucket in report.monthly] == [
        Decimal("1000"),
        Decimal("250"),
        Decimal("50"),
    ]


def test_client_report_lists_every_client() -> None:
    rows = GetClientReportUseCase(_store(), logger=MagicMock()).execute()

    assert [row.client_name for row in rows] == ["Acme", "Globex"]
    assert rows[0].total_billed == Decimal("1500")
    assert rows[0].recognized_revenue == Decimal("1250")


def test_order_report_is_newest_first_with_names() -> None:
    rows = GetOrderReportUseCase(_store(), logger=MagicMock()).execute()

    assert [row.order.id for row in rows] == ["o4", "o3", "o2", "o1"]
    assert rows[0].client_name == "Unknown Client"


def test_order_report_applies_filters() -> None:
    rows = GetOrderReportUseCase(_store(), logger=MagicMock()).execute(
        OrderFilter(client_id="c1", text_query="web")
    )

    assert [row.order.id for row in rows] == ["o2"]


def test_expense_report_totals_filtered_expenses() -> None:
    report = GetExpenseReportUseCase(_store(), logger=MagicMock()).execute(
        ExpenseFilter(category="tools")
    )

    assert [expense.id for expense in report.expenses] == ["e3", "e1"]
    assert report.total == Decimal("75")
    assert report.by_category == {"tools": Decimal("75")}


def test_calendar_events_for_month_sorted_by_deadline() -> None:
    events = GetCalendarEventsUseCase(_store(), logger=MagicMock()).execute(2024, 3)

    assert [event.order_id for event in events] == ["o2", "o3", "o4"]
    assert events[1].color == "destructive"
