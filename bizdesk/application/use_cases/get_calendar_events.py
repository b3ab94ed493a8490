"""Use case to place order deadlines on a month calendar."""

from bizdesk.application.ports.record_store import RecordStorePort
from bizdesk.domain.models import CalendarEvent
from bizdesk.domain.services.calendar_events import build_deadline_events
from bizdesk.infrastructure.logging.logger import get_app_logger


class GetCalendarEventsUseCase:
    """Return the deadline events of a given month."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def execute(self, year: int, month: int) -> list[CalendarEvent]:
        """Return the month's deadline events sorted by date.

        Args:
            year: Calendar year.
            month: Calendar month, 1-12.

        Returns:
            list[CalendarEvent]: Events whose deadline falls in the month.

        Raises:
            StoreError: When the Record Store cannot be read.
        """
        orders = [
            order
            for order in self._record_store.list_orders()
            if order.deadline.year == year and order.deadline.month == month
        ]
        events = build_deadline_events(orders, self._record_store.list_clients())
        events.sort(key=lambda event: event.date)
        self._logger.info(
            f"Found {len(events)} deadlines for {year}-{month:02d}"
        )
        return events


__all__ = ["GetCalendarEventsUseCase", "CalendarEvent"]
