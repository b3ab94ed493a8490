"""Validated CRUD over the Record Store.

Every operation returns an ``OperationResult``. Validation failures, missing
records and store failures are logged and returned as the error branch;
unexpected exceptions propagate.
"""

from collections.abc import Callable, Mapping
from dataclasses import replace
from decimal import Decimal
from typing import Any, TypeVar

from bizdesk.application.ports.record_store import RecordStorePort
from bizdesk.application.use_cases.results import OperationResult
from bizdesk.domain.errors import BusinessDeskError, NotFoundError
from bizdesk.domain.models import (
    Client,
    Expense,
    NewClient,
    NewExpense,
    NewOrder,
    Order,
)
from bizdesk.domain.services.lifecycle import (
    apply_payment,
    check_amount_paid_change,
    check_status_transition,
)
from bizdesk.domain.services.validation import (
    validate_changes,
    validate_client,
    validate_expense,
    validate_new_client,
    validate_new_expense,
    validate_new_order,
    validate_order,
)
from bizdesk.infrastructure.logging.logger import get_app_logger

T = TypeVar("T")


class RecordService:
    """Validate writes, then delegate them to the Record Store."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        """Initialize the service.

        Args:
            record_store: Port providing CRUD access to the collections.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = record_store
        self._logger = logger or get_app_logger()

    def _run(
        self,
        description: str,
        operation: Callable[[], T],
    ) -> OperationResult[T]:
        try:
            value = operation()
        except BusinessDeskError as exc:
            self._logger.warning(f"{description} failed: {exc}")
            return OperationResult.failure(exc)
        self._logger.info(f"{description} succeeded")
        return OperationResult.success(value)

    # Clients

    def list_clients(self) -> OperationResult[list[Client]]:
        return self._run("List clients", self._store.list_clients)

    def create_client(self, draft: NewClient) -> OperationResult[Client]:
        def _create() -> Client:
            validate_new_client(draft)
            return self._store.insert_client(draft)

        return self._run(f"Create client '{draft.name}'", _create)

    def update_client(
        self,
        client_id: str,
        changes: Mapping[str, Any],
    ) -> OperationResult[Client]:
        def _update() -> Client:
            validate_changes("client", changes)
            current = self._get_client(client_id)
            validate_client(replace(current, **changes))
            return self._store.update_client(client_id, changes)

        return self._run(f"Update client {client_id}", _update)

    def delete_client(self, client_id: str) -> OperationResult[None]:
        return self._run(
            f"Delete client {client_id}",
            lambda: self._store.delete_client(client_id),
        )

    # Orders

    def list_orders(self) -> OperationResult[list[Order]]:
        return self._run("List orders", self._store.list_orders)

    def create_order(self, draft: NewOrder) -> OperationResult[Order]:
        def _create() -> Order:
            validate_new_order(draft)
            return self._store.insert_order(draft)

        return self._run(f"Create order '{draft.title}'", _create)

    def update_order(
        self,
        order_id: str,
        changes: Mapping[str, Any],
    ) -> OperationResult[Order]:
        return self._run(
            f"Update order {order_id}",
            lambda: self._update_order(order_id, changes),
        )

    def set_order_status(
        self,
        order_id: str,
        status: str,
    ) -> OperationResult[Order]:
        """Move an order through its lifecycle (e.g. mark it complete)."""
        return self._run(
            f"Set order {order_id} status to {status}",
            lambda: self._update_order(order_id, {"status": status}),
        )

    def process_payment(
        self,
        order_id: str,
        amount: Decimal,
    ) -> OperationResult[Order]:
        """Record a payment and derive the new payment status.

        Args:
            order_id: Order receiving the payment.
            amount: Positive amount not exceeding the remaining balance.

        Returns:
            OperationResult[Order]: The updated order, or the error.
        """

        def _pay() -> Order:
            current = self._get_order(order_id)
            changes = apply_payment(current, amount)
            return self._store.update_order(order_id, changes)

        return self._run(f"Process payment of {amount} on {order_id}", _pay)

    def delete_order(self, order_id: str) -> OperationResult[None]:
        return self._run(
            f"Delete order {order_id}",
            lambda: self._store.delete_order(order_id),
        )

    # Expenses

    def list_expenses(self) -> OperationResult[list[Expense]]:
        return self._run("List expenses", self._store.list_expenses)

    def create_expense(self, draft: NewExpense) -> OperationResult[Expense]:
        def _create() -> Expense:
            validate_new_expense(draft)
            return self._store.insert_expense(draft)

        return self._run(f"Create expense '{draft.title}'", _create)

    def update_expense(
        self,
        expense_id: str,
        changes: Mapping[str, Any],
    ) -> OperationResult[Expense]:
        def _update() -> Expense:
            validate_changes("expense", changes)
            current = self._get_expense(expense_id)
            validate_expense(replace(current, **changes))
            return self._store.update_expense(expense_id, changes)

        return self._run(f"Update expense {expense_id}", _update)

    def delete_expense(self, expense_id: str) -> OperationResult[None]:
        return self._run(
            f"Delete expense {expense_id}",
            lambda: self._store.delete_expense(expense_id),
        )

    # Helpers

    def _update_order(
        self,
        order_id: str,
        changes: Mapping[str, Any],
    ) -> Order:
        validate_changes("order", changes)
        current = self._get_order(order_id)
        if "status" in changes:
            check_status_transition(current.status, changes["status"])
        check_amount_paid_change(current, changes)
        validate_order(replace(current, **changes))
        return self._store.update_order(order_id, changes)

    def _get_client(self, client_id: str) -> Client:
        for client in self._store.list_clients():
            if client.id == client_id:
                return client
        raise NotFoundError("Client", client_id)

    def _get_order(self, order_id: str) -> Order:
        for order in self._store.list_orders():
            if order.id == order_id:
                return order
        raise NotFoundError("Order", order_id)

    def _get_expense(self, expense_id: str) -> Expense:
        for expense in self._store.list_expenses():
            if expense.id == expense_id:
                return expense
        raise NotFoundError("Expense", expense_id)


__all__ = ["RecordService"]
