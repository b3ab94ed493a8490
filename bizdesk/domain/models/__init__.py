"""Domain models package."""

from .records import Client, Expense, NewClient, NewExpense, NewOrder, Order
from .reports import (
    CalendarEvent,
    ClientReportRow,
    DashboardSummary,
    ExpenseReport,
    MonthlyBucket,
    OrderReportRow,
    ProfitLossReport,
    TopClientEntry,
)

__all__ = [
    "Client",
    "Order",
    "Expense",
    "NewClient",
    "NewOrder",
    "NewExpense",
    "MonthlyBucket",
    "TopClientEntry",
    "ClientReportRow",
    "OrderReportRow",
    "ExpenseReport",
    "ProfitLossReport",
    "DashboardSummary",
    "CalendarEvent",
]
