"""Filtering helpers over record snapshots.

Filters never reorder their input and never mutate it. Every predicate is
optional; an absent predicate matches all records. Sorting is a separate,
explicit step.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime

from bizdesk.domain.models import Client, Expense, Order


@dataclass(frozen=True)
class OrderFilter:
    """Optional predicates for orders.

    Attributes:
        status: Exact order status.
        payment_status: Exact payment status.
        client_id: Exact client reference.
        text_query: Case-insensitive substring of title or description.
        date_from: Inclusive lower bound on the ``created_at`` date.
        date_to: Inclusive upper bound on the ``created_at`` date.
    """

    status: str | None = None
    payment_status: str | None = None
    client_id: str | None = None
    text_query: str | None = None
    date_from: date | None = None
    date_to: date | None = None


@dataclass(frozen=True)
class ExpenseFilter:
    """Optional predicates for expenses; text matches title or notes."""

    category: str | None = None
    text_query: str | None = None
    date_from: date | None = None
    date_to: date | None = None


@dataclass(frozen=True)
class ClientFilter:
    """Optional predicates for clients; text matches name or email."""

    text_query: str | None = None


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def _normalize_query(query: str | None) -> str:
    return (query or "").strip().lower()


def _matches_text(query: str, *fields: str | None) -> bool:
    if not query:
        return True
    return any(query in (field or "").lower() for field in fields)


def in_date_range(
    moment: date | datetime,
    date_from: date | None,
    date_to: date | None,
) -> bool:
    """Return True when ``moment`` falls inside the inclusive range."""
    day = _as_date(moment)
    if date_from is not None and day < _as_date(date_from):
        return False
    if date_to is not None and day > _as_date(date_to):
        return False
    return True


def filter_orders(
    orders: Iterable[Order],
    criteria: OrderFilter | None = None,
) -> list[Order]:
    """Return the orders matching every supplied predicate."""
    criteria = criteria or OrderFilter()
    query = _normalize_query(criteria.text_query)
    return [
        order
        for order in orders
        if (criteria.status is None or order.status == criteria.status)
        and (
            criteria.payment_status is None
            or order.payment_status == criteria.payment_status
        )
        and (
            criteria.client_id is None
            or order.client_id == criteria.client_id
        )
        and _matches_text(query, order.title, order.description)
        and in_date_range(order.created_at, criteria.date_from, criteria.date_to)
    ]


def filter_expenses(
    expenses: Iterable[Expense],
    criteria: ExpenseFilter | None = None,
) -> list[Expense]:
    """Return the expenses matching every supplied predicate."""
    criteria = criteria or ExpenseFilter()
    query = _normalize_query(criteria.text_query)
    return [
        expense
        for expense in expenses
        if (criteria.category is None or expense.category == criteria.category)
        and _matches_text(query, expense.title, expense.notes)
        and in_date_range(expense.date, criteria.date_from, criteria.date_to)
    ]


def filter_clients(
    clients: Iterable[Client],
    criteria: ClientFilter | None = None,
) -> list[Client]:
    """Return the clients whose name or email contains the text query."""
    criteria = criteria or ClientFilter()
    query = _normalize_query(criteria.text_query)
    return [
        client
        for client in clients
        if _matches_text(query, client.name, client.email)
    ]


def sort_orders_newest_first(orders: Iterable[Order]) -> list[Order]:
    """Return orders sorted by ``created_at`` descending."""
    return sorted(orders, key=lambda order: order.created_at, reverse=True)


def sort_expenses_newest_first(expenses: Iterable[Expense]) -> list[Expense]:
    """Return expenses sorted by ``date`` descending."""
    return sorted(expenses, key=lambda expense: expense.date, reverse=True)


__all__ = [
    "OrderFilter",
    "ExpenseFilter",
    "ClientFilter",
    "in_date_range",
    "filter_orders",
    "filter_expenses",
    "filter_clients",
    "sort_orders_newest_first",
    "sort_expenses_newest_first",
]
