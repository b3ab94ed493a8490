"""Use case to list filtered orders with their client names."""

from bizdesk.application.ports.record_store import RecordStorePort
from bizdesk.domain.models import OrderReportRow
from bizdesk.domain.services.filters import (
    OrderFilter,
    filter_orders,
    sort_orders_newest_first,
)
from bizdesk.domain.services.lookup import build_client_names
from bizdesk.infrastructure.logging.logger import get_app_logger


class GetOrderReportUseCase:
    """Filter orders, newest first, with dangling clients tolerated."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        criteria: OrderFilter | None = None,
    ) -> list[OrderReportRow]:
        """Return matching orders sorted by creation time, newest first.

        Args:
            criteria: Optional predicates; None matches every order.

        Returns:
            list[OrderReportRow]: Orders paired with client display names.

        Raises:
            StoreError: When the Record Store cannot be read.
        """
        clients = self._record_store.list_clients()
        orders = filter_orders(self._record_store.list_orders(), criteria)
        names = build_client_names(clients, orders)
        rows = [
            OrderReportRow(order=order, client_name=names[order.client_id])
            for order in sort_orders_newest_first(orders)
        ]
        self._logger.info(f"Order report matched {len(rows)} orders")
        return rows


__all__ = ["GetOrderReportUseCase", "OrderFilter"]
