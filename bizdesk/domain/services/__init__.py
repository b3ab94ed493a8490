"""Domain services package."""

from .aggregation import (
    activity_series,
    client_report,
    expenses_by_category,
    monthly_series,
    net_profit,
    payment_breakdown,
    profit_loss,
    status_breakdown,
    top_clients,
    total_expenses,
    total_revenue,
    yearly_series,
)
from .calendar_events import build_deadline_events, days_with_events, events_on
from .filters import (
    ClientFilter,
    ExpenseFilter,
    OrderFilter,
    filter_clients,
    filter_expenses,
    filter_orders,
    sort_expenses_newest_first,
    sort_orders_newest_first,
)
from .lifecycle import (
    apply_payment,
    check_status_transition,
    find_orders_to_mark_overdue,
    is_overdue,
    live_overdue_orders,
)
from .lookup import build_client_names, find_client
from .revenue import DEFAULT_REVENUE_POLICY, RevenuePolicy

__all__ = [
    "activity_series",
    "client_report",
    "expenses_by_category",
    "monthly_series",
    "net_profit",
    "payment_breakdown",
    "profit_loss",
    "status_breakdown",
    "top_clients",
    "total_expenses",
    "total_revenue",
    "yearly_series",
    "build_deadline_events",
    "days_with_events",
    "events_on",
    "ClientFilter",
    "ExpenseFilter",
    "OrderFilter",
    "filter_clients",
    "filter_expenses",
    "filter_orders",
    "sort_expenses_newest_first",
    "sort_orders_newest_first",
    "apply_payment",
    "check_status_transition",
    "find_orders_to_mark_overdue",
    "is_overdue",
    "live_overdue_orders",
    "build_client_names",
    "find_client",
    "DEFAULT_REVENUE_POLICY",
    "RevenuePolicy",
]
