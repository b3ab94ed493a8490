"""CLI adapter printing the profit and loss report."""

from datetime import date
import os

from bizdesk.application.use_cases.get_profit_loss_report import (
    GetProfitLossReportUseCase,
)
from bizdesk.infrastructure.container import (
    build_record_store,
    build_revenue_policy,
)
from bizdesk.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def main(today: date | None = None) -> None:
    """Print revenue, expenses and net profit month by month."""
    logger = get_app_logger()
    today = today or date.today()
    start = _parse_date(os.getenv("BIZDESK_REPORT_START"), logger)
    end = _parse_date(os.getenv("BIZDESK_REPORT_END"), logger)
    start = start or date(today.year, 1, 1)
    end = end or date(today.year, 12, 31)

    use_case = GetProfitLossReportUseCase(
        build_record_store(),
        revenue_policy=build_revenue_policy(),
        logger=logger,
    )
    report = use_case.execute(start, end)
    get_usage_logger().info(f"Profit and loss report run for {start}..{end}")

    print(f"Profit & loss ({report.start} to {report.end})")
    for bucket in report.monthly:
        print(
            f"{bucket.label}: revenue={bucket.revenue}, "
            f"expenses={bucket.expenses}, profit={bucket.profit}"
        )
    print(
        f"Total: revenue={report.total_revenue}, "
        f"expenses={report.total_expenses}, "
        f"net_profit={report.net_profit}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
