"""CLI adapter to persist the overdue status of late orders.

This module wires the ReconcileOverdueOrdersUseCase to the configured Record
Store and provides a command-line entry point suitable for a scheduler.
"""

from bizdesk.application.use_cases.reconcile_overdue_orders import (
    ReconcileOverdueOrdersUseCase,
)
from bizdesk.infrastructure.container import build_record_store
from bizdesk.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run the overdue reconciliation use case."""
    logger = get_app_logger()
    record_store = build_record_store()
    use_case = ReconcileOverdueOrdersUseCase(record_store, logger=logger)

    result = use_case.run()

    print(
        f"Checked {result.checked_count} orders; "
        f"marked {result.updated_count} as overdue."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
