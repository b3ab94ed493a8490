"""Domain models for dashboard and report aggregates."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from .records import Expense, Order

_MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


@dataclass(frozen=True)
class MonthlyBucket:
    """Revenue and expenses for one calendar month."""

    year: int
    month: int
    revenue: Decimal
    expenses: Decimal

    @property
    def profit(self) -> Decimal:
        """Return revenue minus expenses."""
        return self.revenue - self.expenses

    @property
    def label(self) -> str:
        """Return a short label such as ``Jan 2024``."""
        return f"{_MONTH_ABBREVIATIONS[self.month - 1]} {self.year}"


@dataclass(frozen=True)
class TopClientEntry:
    """Recognized revenue attributed to a single client."""

    client_id: str
    client_name: str
    revenue: Decimal


@dataclass(frozen=True)
class ClientReportRow:
    """Per-client order statistics.

    Attributes:
        client_id: Client identifier.
        client_name: Client display name.
        email: Client email.
        total_orders: Number of orders for the client.
        total_billed: Sum of order costs.
        recognized_revenue: Revenue recognized under the active policy.
        completed_orders: Orders with status complete.
        pending_orders: Orders with status pending.
        overdue_orders: Orders with status overdue.
    """

    client_id: str
    client_name: str
    email: str
    total_orders: int
    total_billed: Decimal
    recognized_revenue: Decimal
    completed_orders: int
    pending_orders: int
    overdue_orders: int


@dataclass(frozen=True)
class OrderReportRow:
    """An order paired with its resolved client name."""

    order: Order
    client_name: str


@dataclass(frozen=True)
class ExpenseReport:
    """Filtered expenses with their totals."""

    expenses: list[Expense]
    total: Decimal
    by_category: dict[str, Decimal]


@dataclass(frozen=True)
class ProfitLossReport:
    """Profit and loss figures for a date range."""

    start: date
    end: date
    total_revenue: Decimal
    total_expenses: Decimal
    monthly: list[MonthlyBucket]

    @property
    def net_profit(self) -> Decimal:
        """Return total revenue minus total expenses."""
        return self.total_revenue - self.total_expenses


@dataclass(frozen=True)
class DashboardSummary:
    """Headline figures and series for the dashboard."""

    total_revenue: Decimal
    total_expenses: Decimal
    net_profit: Decimal
    active_clients: int
    total_orders: int
    monthly: list[MonthlyBucket]
    top_clients: list[TopClientEntry]
    status_breakdown: dict[str, int]
    overdue_orders: list[OrderReportRow]


@dataclass(frozen=True)
class CalendarEvent:
    """An order deadline placed on the calendar."""

    id: str
    title: str
    date: datetime
    type: str
    order_id: str
    client_id: str
    client_name: str
    status: str
    color: str


__all__ = [
    "MonthlyBucket",
    "TopClientEntry",
    "ClientReportRow",
    "OrderReportRow",
    "ExpenseReport",
    "ProfitLossReport",
    "DashboardSummary",
    "CalendarEvent",
]
