"""Domain services for dashboard and report aggregates.

All functions are pure reductions over record snapshots. Money is summed as
``Decimal`` so results do not depend on summation order.
"""

from collections.abc import Iterable, Iterator, Sequence
from datetime import date
from decimal import Decimal

from bizdesk.domain.constants import (
    ORDER_STATUS_COMPLETE,
    ORDER_STATUS_OVERDUE,
    ORDER_STATUS_PENDING,
    ORDER_STATUSES,
    PAYMENT_STATUSES,
    TOP_CLIENTS_LIMIT,
)
from bizdesk.domain.models import (
    Client,
    ClientReportRow,
    Expense,
    MonthlyBucket,
    Order,
    ProfitLossReport,
    TopClientEntry,
)
from bizdesk.domain.services.filters import in_date_range
from bizdesk.domain.services.lookup import index_clients, resolve_client_name
from bizdesk.domain.services.revenue import DEFAULT_REVENUE_POLICY, RevenuePolicy
from bizdesk.utils.decimal_utils import ZERO, sum_decimals

MonthKey = tuple[int, int]


def total_revenue(
    orders: Iterable[Order],
    policy: RevenuePolicy = DEFAULT_REVENUE_POLICY,
) -> Decimal:
    """Return the recognized revenue summed over ``orders``."""
    return sum_decimals(policy.recognized(order) for order in orders)


def total_expenses(expenses: Iterable[Expense]) -> Decimal:
    """Return the sum of expense amounts."""
    return sum_decimals(expense.amount for expense in expenses)


def net_profit(
    orders: Iterable[Order],
    expenses: Iterable[Expense],
    policy: RevenuePolicy = DEFAULT_REVENUE_POLICY,
) -> Decimal:
    """Return total revenue minus total expenses."""
    return total_revenue(orders, policy) - total_expenses(expenses)


def _month_key(moment: date) -> MonthKey:
    return (moment.year, moment.month)


def _iter_months(first: MonthKey, last: MonthKey) -> Iterator[MonthKey]:
    year, month = first
    while (year, month) <= last:
        yield (year, month)
        month += 1
        if month > 12:
            year += 1
            month = 1


def _monthly_totals(
    orders: Iterable[Order],
    expenses: Iterable[Expense],
    policy: RevenuePolicy,
) -> tuple[dict[MonthKey, Decimal], dict[MonthKey, Decimal]]:
    revenue: dict[MonthKey, Decimal] = {}
    spent: dict[MonthKey, Decimal] = {}
    for order in orders:
        key = _month_key(order.created_at)
        revenue[key] = revenue.get(key, ZERO) + policy.recognized(order)
    for expense in expenses:
        key = _month_key(expense.date)
        spent[key] = spent.get(key, ZERO) + expense.amount
    return revenue, spent


def _buckets(
    months: Iterable[MonthKey],
    revenue: dict[MonthKey, Decimal],
    spent: dict[MonthKey, Decimal],
) -> list[MonthlyBucket]:
    return [
        MonthlyBucket(
            year=year,
            month=month,
            revenue=revenue.get((year, month), ZERO),
            expenses=spent.get((year, month), ZERO),
        )
        for year, month in months
    ]


def monthly_series(
    orders: Iterable[Order],
    expenses: Iterable[Expense],
    start: date,
    end: date,
    policy: RevenuePolicy = DEFAULT_REVENUE_POLICY,
) -> list[MonthlyBucket]:
    """Return one bucket per calendar month from ``start`` to ``end``.

    Orders are bucketed by ``created_at`` and expenses by ``date``. Months
    without activity are zero-filled; records outside the range are ignored.

    Args:
        orders: Order snapshot.
        expenses: Expense snapshot.
        start: Any day in the first month of the series.
        end: Any day in the last month of the series.
        policy: Revenue recognition policy.

    Returns:
        list[MonthlyBucket]: Chronological buckets; empty when ``end`` falls
        in an earlier month than ``start``.
    """
    revenue, spent = _monthly_totals(orders, expenses, policy)
    months = _iter_months(_month_key(start), _month_key(end))
    return _buckets(months, revenue, spent)


def yearly_series(
    orders: Iterable[Order],
    expenses: Iterable[Expense],
    year: int,
    policy: RevenuePolicy = DEFAULT_REVENUE_POLICY,
) -> list[MonthlyBucket]:
    """Return the twelve zero-filled buckets of ``year``."""
    return monthly_series(
        orders,
        expenses,
        date(year, 1, 1),
        date(year, 12, 31),
        policy,
    )


def activity_series(
    orders: Iterable[Order],
    expenses: Iterable[Expense],
    policy: RevenuePolicy = DEFAULT_REVENUE_POLICY,
) -> list[MonthlyBucket]:
    """Return buckets from the first to the last month with any record."""
    orders = list(orders)
    expenses = list(expenses)
    keys = [_month_key(order.created_at) for order in orders]
    keys.extend(_month_key(expense.date) for expense in expenses)
    if not keys:
        return []
    revenue, spent = _monthly_totals(orders, expenses, policy)
    return _buckets(_iter_months(min(keys), max(keys)), revenue, spent)


def top_clients(
    orders: Iterable[Order],
    clients: Iterable[Client],
    policy: RevenuePolicy = DEFAULT_REVENUE_POLICY,
    limit: int = TOP_CLIENTS_LIMIT,
) -> list[TopClientEntry]:
    """Rank clients by recognized revenue.

    Ties keep the order in which clients were first seen in ``orders``;
    clients with zero recognized revenue are left out.
    """
    totals: dict[str, Decimal] = {}
    for order in orders:
        totals[order.client_id] = (
            totals.get(order.client_id, ZERO) + policy.recognized(order)
        )
    clients_by_id = index_clients(clients)
    entries = [
        TopClientEntry(
            client_id=client_id,
            client_name=resolve_client_name(clients_by_id, client_id),
            revenue=revenue,
        )
        for client_id, revenue in totals.items()
        if revenue > 0
    ]
    entries.sort(key=lambda entry: entry.revenue, reverse=True)
    return entries[:limit]


def _count_by(values: Iterable[str], keys: Sequence[str]) -> dict[str, int]:
    counts = {key: 0 for key in keys}
    for value in values:
        if value in counts:
            counts[value] += 1
    return counts


def status_breakdown(orders: Iterable[Order]) -> dict[str, int]:
    """Count orders per status, always including every known status."""
    return _count_by((order.status for order in orders), ORDER_STATUSES)


def payment_breakdown(orders: Iterable[Order]) -> dict[str, int]:
    """Count orders per payment status, always including every known one."""
    return _count_by(
        (order.payment_status for order in orders),
        PAYMENT_STATUSES,
    )


def expenses_by_category(expenses: Iterable[Expense]) -> dict[str, Decimal]:
    """Sum expense amounts per category present in ``expenses``."""
    totals: dict[str, Decimal] = {}
    for expense in expenses:
        totals[expense.category] = (
            totals.get(expense.category, ZERO) + expense.amount
        )
    return totals


def client_report(
    clients: Iterable[Client],
    orders: Iterable[Order],
    policy: RevenuePolicy = DEFAULT_REVENUE_POLICY,
) -> list[ClientReportRow]:
    """Return per-client statistics, highest recognized revenue first."""
    orders_by_client: dict[str, list[Order]] = {}
    for order in orders:
        orders_by_client.setdefault(order.client_id, []).append(order)

    rows = []
    for client in clients:
        client_orders = orders_by_client.get(client.id, [])
        statuses = status_breakdown(client_orders)
        rows.append(
            ClientReportRow(
                client_id=client.id,
                client_name=client.name,
                email=client.email,
                total_orders=len(client_orders),
                total_billed=sum_decimals(o.cost for o in client_orders),
                recognized_revenue=total_revenue(client_orders, policy),
                completed_orders=statuses[ORDER_STATUS_COMPLETE],
                pending_orders=statuses[ORDER_STATUS_PENDING],
                overdue_orders=statuses[ORDER_STATUS_OVERDUE],
            )
        )
    rows.sort(key=lambda row: row.recognized_revenue, reverse=True)
    return rows


def profit_loss(
    orders: Iterable[Order],
    expenses: Iterable[Expense],
    start: date,
    end: date,
    policy: RevenuePolicy = DEFAULT_REVENUE_POLICY,
) -> ProfitLossReport:
    """Compute profit and loss for the inclusive range ``[start, end]``.

    Args:
        orders: Order snapshot, bucketed by ``created_at``.
        expenses: Expense snapshot, bucketed by ``date``.
        start: First day of the range.
        end: Last day of the range.
        policy: Revenue recognition policy.

    Returns:
        ProfitLossReport: Totals and the monthly breakdown of the range.
    """
    in_range_orders = [
        order for order in orders if in_date_range(order.created_at, start, end)
    ]
    in_range_expenses = [
        expense
        for expense in expenses
        if in_date_range(expense.date, start, end)
    ]
    return ProfitLossReport(
        start=start,
        end=end,
        total_revenue=total_revenue(in_range_orders, policy),
        total_expenses=total_expenses(in_range_expenses),
        monthly=monthly_series(
            in_range_orders,
            in_range_expenses,
            start,
            end,
            policy,
        ),
    )


__all__ = [
    "total_revenue",
    "total_expenses",
    "net_profit",
    "monthly_series",
    "yearly_series",
    "activity_series",
    "top_clients",
    "status_breakdown",
    "payment_breakdown",
    "expenses_by_category",
    "client_report",
    "profit_loss",
]
