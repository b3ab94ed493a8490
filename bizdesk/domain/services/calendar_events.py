"""Order deadlines as calendar events."""

from collections.abc import Iterable
from datetime import date

from bizdesk.domain.constants import ORDER_STATUS_COMPLETE, ORDER_STATUS_OVERDUE
from bizdesk.domain.models import CalendarEvent, Client, Order
from bizdesk.domain.services.lookup import index_clients, resolve_client_name

_STATUS_COLORS = {
    ORDER_STATUS_OVERDUE: "destructive",
    ORDER_STATUS_COMPLETE: "success",
}


def build_deadline_events(
    orders: Iterable[Order],
    clients: Iterable[Client],
) -> list[CalendarEvent]:
    """Return one deadline event per order, in input order."""
    clients_by_id = index_clients(clients)
    return [
        CalendarEvent(
            id=order.id,
            title=order.title,
            date=order.deadline,
            type="deadline",
            order_id=order.id,
            client_id=order.client_id,
            client_name=resolve_client_name(clients_by_id, order.client_id),
            status=order.status,
            color=_STATUS_COLORS.get(order.status, "primary"),
        )
        for order in orders
    ]


def events_on(events: Iterable[CalendarEvent], day: date) -> list[CalendarEvent]:
    """Return the events falling on ``day``."""
    return [event for event in events if event.date.date() == day]


def days_with_events(
    events: Iterable[CalendarEvent],
    year: int,
    month: int,
) -> list[date]:
    """Return the sorted distinct days of ``year``/``month`` with events."""
    days = {
        event.date.date()
        for event in events
        if event.date.year == year and event.date.month == month
    }
    return sorted(days)


__all__ = ["build_deadline_events", "events_on", "days_with_events"]
