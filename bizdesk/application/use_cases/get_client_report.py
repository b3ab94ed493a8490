"""Use case to list per-client order statistics."""

from bizdesk.application.ports.record_store import RecordStorePort
from bizdesk.domain.models import ClientReportRow
from bizdesk.domain.services.aggregation import client_report
from bizdesk.domain.services.revenue import DEFAULT_REVENUE_POLICY, RevenuePolicy
from bizdesk.infrastructure.logging.logger import get_app_logger


class GetClientReportUseCase:
    """Summarize every client's orders, highest revenue first."""

    def __init__(
        self,
        record_store: RecordStorePort,
        revenue_policy: RevenuePolicy | None = None,
        logger=None,
    ) -> None:
        self._record_store = record_store
        self._policy = revenue_policy or DEFAULT_REVENUE_POLICY
        self._logger = logger or get_app_logger()

    def execute(self) -> list[ClientReportRow]:
        clients = self._record_store.list_clients()
        orders = self._record_store.list_orders()
        rows = client_report(clients, orders, self._policy)
        self._logger.info(f"Client report computed for {len(rows)} clients")
        return rows


__all__ = ["GetClientReportUseCase", "ClientReportRow"]
