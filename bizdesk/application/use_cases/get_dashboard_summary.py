"""Use case to compute the dashboard summary from the Record Store."""

from datetime import datetime

from bizdesk.application.ports.record_store import RecordStorePort
from bizdesk.domain.models import DashboardSummary, OrderReportRow
from bizdesk.domain.services.aggregation import (
    activity_series,
    status_breakdown,
    top_clients,
    total_expenses,
    total_revenue,
)
from bizdesk.domain.services.lifecycle import live_overdue_orders
from bizdesk.domain.services.lookup import build_client_names
from bizdesk.domain.services.revenue import DEFAULT_REVENUE_POLICY, RevenuePolicy
from bizdesk.infrastructure.logging.logger import get_app_logger
from bizdesk.utils.datetime_utils import ensure_utc, utc_now


class GetDashboardSummaryUseCase:
    """Compute headline figures, series and rankings for the dashboard."""

    def __init__(
        self,
        record_store: RecordStorePort,
        revenue_policy: RevenuePolicy | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            record_store: Port providing record snapshots.
            revenue_policy: Revenue recognition policy shared by all reports.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._record_store = record_store
        self._policy = revenue_policy or DEFAULT_REVENUE_POLICY
        self._logger = logger or get_app_logger()

    def execute(self, now: datetime | None = None) -> DashboardSummary:
        """Return the dashboard summary.

        Args:
            now: Reference time for live overdue detection; defaults to the
                current UTC time.

        Returns:
            DashboardSummary: Totals, monthly series, top clients, status
            counts and overdue orders with client names.

        Raises:
            StoreError: When the Record Store cannot be read.
        """
        now = ensure_utc(now or utc_now())
        clients = self._record_store.list_clients()
        orders = self._record_store.list_orders()
        expenses = self._record_store.list_expenses()
        self._logger.info(
            f"Fetched {len(clients)} clients, {len(orders)} orders and "
            f"{len(expenses)} expenses for the dashboard"
        )

        revenue = total_revenue(orders, self._policy)
        spent = total_expenses(expenses)
        overdue = live_overdue_orders(orders, now)
        client_names = build_client_names(clients, overdue)

        summary = DashboardSummary(
            total_revenue=revenue,
            total_expenses=spent,
            net_profit=revenue - spent,
            active_clients=len(clients),
            total_orders=len(orders),
            monthly=activity_series(orders, expenses, self._policy),
            top_clients=top_clients(orders, clients, self._policy),
            status_breakdown=status_breakdown(orders),
            overdue_orders=[
                OrderReportRow(
                    order=order,
                    client_name=client_names[order.client_id],
                )
                for order in overdue
            ],
        )
        self._logger.info(
            f"Dashboard totals computed: revenue={revenue}, "
            f"expenses={spent}, overdue={len(overdue)}"
        )
        return summary


__all__ = ["GetDashboardSummaryUseCase", "DashboardSummary"]
