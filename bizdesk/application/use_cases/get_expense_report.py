"""Use case to list filtered expenses with totals."""

from bizdesk.application.ports.record_store import RecordStorePort
from bizdesk.domain.models import ExpenseReport
from bizdesk.domain.services.aggregation import (
    expenses_by_category,
    total_expenses,
)
from bizdesk.domain.services.filters import (
    ExpenseFilter,
    filter_expenses,
    sort_expenses_newest_first,
)
from bizdesk.infrastructure.logging.logger import get_app_logger


class GetExpenseReportUseCase:
    """Filter expenses by category, text and date range."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def execute(self, criteria: ExpenseFilter | None = None) -> ExpenseReport:
        expenses = filter_expenses(self._record_store.list_expenses(), criteria)
        report = ExpenseReport(
            expenses=sort_expenses_newest_first(expenses),
            total=total_expenses(expenses),
            by_category=expenses_by_category(expenses),
        )
        self._logger.info(
            f"Expense report matched {len(expenses)} expenses "
            f"totalling {report.total}"
        )
        return report


__all__ = ["GetExpenseReportUseCase", "ExpenseFilter"]
