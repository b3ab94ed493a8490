"""Process-local Record Store backed by dictionaries.

Collections keep insertion order, so ``list_*`` snapshots come back in the
order records were created. A re-entrant lock serializes access when the
store is driven from worker threads by ``AsyncRecordStore``.
"""

import threading
import uuid
from collections.abc import Callable, Iterable, Mapping
from dataclasses import asdict, replace
from datetime import datetime
from typing import Any

from bizdesk.application.ports.record_store import RecordStorePort
from bizdesk.domain.constants import ORDER_STATUS_PENDING
from bizdesk.domain.errors import NotFoundError
from bizdesk.domain.models import (
    Client,
    Expense,
    NewClient,
    NewExpense,
    NewOrder,
    Order,
)
from bizdesk.domain.services.validation import validate_changes
from bizdesk.utils.datetime_utils import ensure_utc, utc_now

CLIENTS = "clients"
ORDERS = "orders"
EXPENSES = "expenses"

Collections = dict[str, dict[str, Any]]


def new_record_id() -> str:
    return str(uuid.uuid4())


def _normalize_changes(changes: Mapping[str, Any]) -> dict[str, Any]:
    return {
        name: ensure_utc(value) if isinstance(value, datetime) else value
        for name, value in changes.items()
    }


class InMemoryRecordStore(RecordStorePort):
    """Record Store keeping all collections in memory."""

    def __init__(
        self,
        clients: Iterable[Client] = (),
        orders: Iterable[Order] = (),
        expenses: Iterable[Expense] = (),
        cascade_client_orders: bool = True,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_record_id,
    ) -> None:
        """Initialize the store.

        Args:
            clients: Initial client records.
            orders: Initial order records.
            expenses: Initial expense records.
            cascade_client_orders: Delete a client's orders with the client.
            clock: Source of ``created_at`` timestamps.
            id_factory: Source of record ids.
        """
        self._collections: Collections = {
            CLIENTS: {client.id: client for client in clients},
            ORDERS: {order.id: order for order in orders},
            EXPENSES: {expense.id: expense for expense in expenses},
        }
        self._cascade_client_orders = cascade_client_orders
        self._clock = clock
        self._id_factory = id_factory
        self._lock = threading.RLock()

    # Storage hooks overridden by persistent subclasses.

    def _read(self) -> Collections:
        return self._collections

    def _write(self, collections: Collections) -> None:
        self._collections = collections

    # Generic operations.

    def _list(self, name: str) -> list:
        with self._lock:
            return list(self._read()[name].values())

    def _insert(self, name: str, record):
        with self._lock:
            collections = self._read()
            collections[name][record.id] = record
            self._write(collections)
        return record

    def _update(
        self,
        name: str,
        record_type: str,
        record_id: str,
        changes: Mapping[str, Any],
    ):
        validate_changes(record_type, changes)
        with self._lock:
            collections = self._read()
            current = collections[name].get(record_id)
            if current is None:
                raise NotFoundError(record_type.capitalize(), record_id)
            updated = replace(current, **_normalize_changes(changes))
            collections[name][record_id] = updated
            self._write(collections)
        return updated

    def _delete(self, name: str, record_type: str, record_id: str) -> None:
        with self._lock:
            collections = self._read()
            if record_id not in collections[name]:
                raise NotFoundError(record_type.capitalize(), record_id)
            del collections[name][record_id]
            self._write(collections)

    # Clients

    def list_clients(self) -> list[Client]:
        return self._list(CLIENTS)

    def insert_client(self, draft: NewClient) -> Client:
        client = Client(
            id=self._id_factory(),
            created_at=ensure_utc(self._clock()),
            **asdict(draft),
        )
        return self._insert(CLIENTS, client)

    def update_client(
        self,
        client_id: str,
        changes: Mapping[str, Any],
    ) -> Client:
        return self._update(CLIENTS, "client", client_id, changes)

    def delete_client(self, client_id: str) -> None:
        with self._lock:
            collections = self._read()
            if client_id not in collections[CLIENTS]:
                raise NotFoundError("Client", client_id)
            if self._cascade_client_orders:
                collections[ORDERS] = {
                    order_id: order
                    for order_id, order in collections[ORDERS].items()
                    if order.client_id != client_id
                }
            del collections[CLIENTS][client_id]
            self._write(collections)

    # Orders

    def list_orders(self) -> list[Order]:
        return self._list(ORDERS)

    def insert_order(self, draft: NewOrder) -> Order:
        fields = asdict(draft)
        fields["deadline"] = ensure_utc(draft.deadline)
        order = Order(
            id=self._id_factory(),
            status=ORDER_STATUS_PENDING,
            created_at=ensure_utc(self._clock()),
            **fields,
        )
        return self._insert(ORDERS, order)

    def update_order(self, order_id: str, changes: Mapping[str, Any]) -> Order:
        return self._update(ORDERS, "order", order_id, changes)

    def delete_order(self, order_id: str) -> None:
        self._delete(ORDERS, "order", order_id)

    # Expenses

    def list_expenses(self) -> list[Expense]:
        return self._list(EXPENSES)

    def insert_expense(self, draft: NewExpense) -> Expense:
        fields = asdict(draft)
        fields["date"] = ensure_utc(draft.date)
        return self._insert(EXPENSES, Expense(id=self._id_factory(), **fields))

    def update_expense(
        self,
        expense_id: str,
        changes: Mapping[str, Any],
    ) -> Expense:
        return self._update(EXPENSES, "expense", expense_id, changes)

    def delete_expense(self, expense_id: str) -> None:
        self._delete(EXPENSES, "expense", expense_id)


__all__ = ["InMemoryRecordStore", "CLIENTS", "ORDERS", "EXPENSES"]
