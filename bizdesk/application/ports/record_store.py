"""Application port for the Record Store collaborator.

The store owns the three record collections. Inserts assign ``id`` (and
``created_at`` for clients and orders); callers never supply them. Update and
delete of a missing id raise ``NotFoundError``; backend failures raise
``StoreError``. Reads reflect earlier writes made through the same store.
"""

from collections.abc import Mapping
from typing import Any, Protocol

from bizdesk.domain.models import (
    Client,
    Expense,
    NewClient,
    NewExpense,
    NewOrder,
    Order,
)


class RecordStorePort(Protocol):
    """Port exposing CRUD access to clients, orders and expenses."""

    def list_clients(self) -> list[Client]:
        """Return a snapshot of all clients."""

    def insert_client(self, draft: NewClient) -> Client:
        """Persist a new client and return it with store-assigned fields."""

    def update_client(
        self,
        client_id: str,
        changes: Mapping[str, Any],
    ) -> Client:
        """Apply ``changes`` to a client and return the persisted record."""

    def delete_client(self, client_id: str) -> None:
        """Delete a client, and its orders when the store cascades."""

    def list_orders(self) -> list[Order]:
        """Return a snapshot of all orders."""

    def insert_order(self, draft: NewOrder) -> Order:
        """Persist a new order and return it with store-assigned fields."""

    def update_order(
        self,
        order_id: str,
        changes: Mapping[str, Any],
    ) -> Order:
        """Apply ``changes`` to an order and return the persisted record."""

    def delete_order(self, order_id: str) -> None:
        """Delete an order."""

    def list_expenses(self) -> list[Expense]:
        """Return a snapshot of all expenses."""

    def insert_expense(self, draft: NewExpense) -> Expense:
        """Persist a new expense and return it with its assigned id."""

    def update_expense(
        self,
        expense_id: str,
        changes: Mapping[str, Any],
    ) -> Expense:
        """Apply ``changes`` to an expense and return the persisted record."""

    def delete_expense(self, expense_id: str) -> None:
        """Delete an expense."""


__all__ = ["RecordStorePort"]
