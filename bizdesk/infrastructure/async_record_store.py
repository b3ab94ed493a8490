"""Async facade over a synchronous Record Store.

Each call runs the wrapped store on a worker thread, so async callers can
await store operations without blocking the event loop. Results and errors
pass through unchanged.
"""

import asyncio
from collections.abc import Mapping
from typing import Any

from bizdesk.application.ports.record_store import RecordStorePort
from bizdesk.domain.models import (
    Client,
    Expense,
    NewClient,
    NewExpense,
    NewOrder,
    Order,
)


class AsyncRecordStore:
    """Awaitable wrapper delegating to a ``RecordStorePort``."""

    def __init__(self, record_store: RecordStorePort) -> None:
        self._store = record_store

    @property
    def store(self) -> RecordStorePort:
        return self._store

    async def list_clients(self) -> list[Client]:
        return await asyncio.to_thread(self._store.list_clients)

    async def insert_client(self, draft: NewClient) -> Client:
        return await asyncio.to_thread(self._store.insert_client, draft)

    async def update_client(
        self,
        client_id: str,
        changes: Mapping[str, Any],
    ) -> Client:
        return await asyncio.to_thread(
            self._store.update_client, client_id, changes
        )

    async def delete_client(self, client_id: str) -> None:
        await asyncio.to_thread(self._store.delete_client, client_id)

    async def list_orders(self) -> list[Order]:
        return await asyncio.to_thread(self._store.list_orders)

    async def insert_order(self, draft: NewOrder) -> Order:
        return await asyncio.to_thread(self._store.insert_order, draft)

    async def update_order(
        self,
        order_id: str,
        changes: Mapping[str, Any],
    ) -> Order:
        return await asyncio.to_thread(
            self._store.update_order, order_id, changes
        )

    async def delete_order(self, order_id: str) -> None:
        await asyncio.to_thread(self._store.delete_order, order_id)

    async def list_expenses(self) -> list[Expense]:
        return await asyncio.to_thread(self._store.list_expenses)

    async def insert_expense(self, draft: NewExpense) -> Expense:
        return await asyncio.to_thread(self._store.insert_expense, draft)

    async def update_expense(
        self,
        expense_id: str,
        changes: Mapping[str, Any],
    ) -> Expense:
        return await asyncio.to_thread(
            self._store.update_expense, expense_id, changes
        )

    async def delete_expense(self, expense_id: str) -> None:
        await asyncio.to_thread(self._store.delete_expense, expense_id)

    async def snapshot(self) -> tuple[list[Client], list[Order], list[Expense]]:
        """Fetch all three collections concurrently."""
        clients, orders, expenses = await asyncio.gather(
            self.list_clients(),
            self.list_orders(),
            self.list_expenses(),
        )
        return clients, orders, expenses


__all__ = ["AsyncRecordStore"]
