"""Use case to compute a profit and loss report for a date range."""

from datetime import date

from bizdesk.application.ports.record_store import RecordStorePort
from bizdesk.domain.models import ProfitLossReport
from bizdesk.domain.services.aggregation import profit_loss
from bizdesk.domain.services.revenue import DEFAULT_REVENUE_POLICY, RevenuePolicy
from bizdesk.infrastructure.logging.logger import get_app_logger


class GetProfitLossReportUseCase:
    """Compute revenue, expenses and net profit month by month."""

    def __init__(
        self,
        record_store: RecordStorePort,
        revenue_policy: RevenuePolicy | None = None,
        logger=None,
    ) -> None:
        self._record_store = record_store
        self._policy = revenue_policy or DEFAULT_REVENUE_POLICY
        self._logger = logger or get_app_logger()

    def execute(self, start: date, end: date) -> ProfitLossReport:
        """Return the profit and loss report for ``[start, end]``.

        Args:
            start: First day of the range, inclusive.
            end: Last day of the range, inclusive.

        Returns:
            ProfitLossReport: Totals and zero-filled monthly breakdown.

        Raises:
            StoreError: When the Record Store cannot be read.
        """
        orders = self._record_store.list_orders()
        expenses = self._record_store.list_expenses()
        report = profit_loss(orders, expenses, start, end, self._policy)
        self._logger.info(
            f"Profit/loss computed for {start}..{end}: "
            f"revenue={report.total_revenue}, "
            f"expenses={report.total_expenses}, "
            f"net={report.net_profit}"
        )
        return report


__all__ = ["GetProfitLossReportUseCase", "ProfitLossReport"]
