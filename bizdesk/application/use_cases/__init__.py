"""Application use cases package.

Writes go through ``RecordService``, which returns ``OperationResult`` values.
Report use cases and the overdue reconciliation raise ``StoreError`` instead,
so a failed read is never mistaken for an empty report.
"""

from .get_calendar_events import GetCalendarEventsUseCase
from .get_client_report import GetClientReportUseCase
from .get_dashboard_summary import GetDashboardSummaryUseCase
from .get_expense_report import GetExpenseReportUseCase
from .get_order_report import GetOrderReportUseCase
from .get_profit_loss_report import GetProfitLossReportUseCase
from .reconcile_overdue_orders import (
    ReconcileOverdueOrdersUseCase,
    ReconcileOverdueResult,
)
from .record_service import RecordService
from .results import OperationResult

__all__ = [
    "GetCalendarEventsUseCase",
    "GetClientReportUseCase",
    "GetDashboardSummaryUseCase",
    "GetExpenseReportUseCase",
    "GetOrderReportUseCase",
    "GetProfitLossReportUseCase",
    "ReconcileOverdueOrdersUseCase",
    "ReconcileOverdueResult",
    "RecordService",
    "OperationResult",
]
