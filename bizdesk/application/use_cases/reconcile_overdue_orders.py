"""Use case transitioning late pending orders to overdue.

The persisted ``status`` only changes through the Record Store's update
operation. This job finds pending orders whose deadline has passed and moves
them to ``overdue``; complete orders are never touched.
"""

from dataclasses import dataclass
from datetime import datetime

from bizdesk.application.ports.record_store import RecordStorePort
from bizdesk.domain.constants import ORDER_STATUS_OVERDUE
from bizdesk.domain.services.lifecycle import find_orders_to_mark_overdue
from bizdesk.infrastructure.logging.logger import get_app_logger
from bizdesk.utils.datetime_utils import ensure_utc, utc_now


@dataclass(frozen=True)
class ReconcileOverdueResult:
    """Result of a reconciliation run.

    Attributes:
        checked_count: Number of orders inspected.
        updated_ids: Ids of orders moved to ``overdue``, in store order.
    """

    checked_count: int
    updated_ids: list[str]

    @property
    def updated_count(self) -> int:
        return len(self.updated_ids)


class ReconcileOverdueOrdersUseCase:
    """Persist the overdue status of pending orders past their deadline."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            record_store: Port used to read and update orders.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def run(self, now: datetime | None = None) -> ReconcileOverdueResult:
        """Execute the reconciliation.

        Store failures propagate; orders updated before a failure stay
        updated.

        Args:
            now: Reference time; defaults to the current UTC time.

        Returns:
            ReconcileOverdueResult: Summary of inspected and updated orders.
        """
        now = ensure_utc(now or utc_now())
        orders = self._record_store.list_orders()
        late = find_orders_to_mark_overdue(orders, now)
        updated_ids = []
        for order in late:
            self._record_store.update_order(
                order.id,
                {"status": ORDER_STATUS_OVERDUE},
            )
            updated_ids.append(order.id)
        self._logger.info(
            f"Checked {len(orders)} orders, marked {len(updated_ids)} overdue"
        )
        return ReconcileOverdueResult(
            checked_count=len(orders),
            updated_ids=updated_ids,
        )


__all__ = ["ReconcileOverdueOrdersUseCase", "ReconcileOverdueResult"]
