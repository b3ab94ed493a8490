"""SQLAlchemy-backed Record Store.

Records live in three tables with snake_case columns. Timestamps are stored
as ISO-8601 UTC strings and amounts as NUMERIC; both are normalized back to
canonical records by ``record_mapping``. ``orders.client_id`` carries no
foreign key constraint because dangling references are tolerated.
"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import asdict, replace
from datetime import datetime
from typing import Any, Callable

from sqlalchemy import text
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from bizdesk.application.ports.database import DatabaseEnginePort
from bizdesk.application.ports.record_store import RecordStorePort
from bizdesk.domain.constants import ORDER_STATUS_PENDING
from bizdesk.domain.errors import NotFoundError, StoreError
from bizdesk.domain.models import (
    Client,
    Expense,
    NewClient,
    NewExpense,
    NewOrder,
    Order,
)
from bizdesk.domain.services.validation import validate_changes
from bizdesk.infrastructure.memory_record_store import new_record_id
from bizdesk.infrastructure.record_mapping import (
    CLIENT_FIELDS,
    EXPENSE_FIELDS,
    ORDER_FIELDS,
    client_from_mapping,
    expense_from_mapping,
    order_from_mapping,
    to_row,
)
from bizdesk.utils.datetime_utils import ensure_utc, utc_now


CREATE_CLIENTS_SQL = """
CREATE TABLE IF NOT EXISTS clients (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    email TEXT NOT NULL,
    phone TEXT,
    preferred_payment_method TEXT,
    notes TEXT,
    created_at TEXT NOT NULL
)
"""

CREATE_ORDERS_SQL = """
CREATE TABLE IF NOT EXISTS orders (
    id TEXT PRIMARY KEY,
    client_id TEXT NOT NULL,
    title TEXT NOT NULL,
    description TEXT,
    deadline TEXT NOT NULL,
    cost NUMERIC(12, 2) NOT NULL,
    status TEXT NOT NULL,
    payment_status TEXT NOT NULL,
    created_at TEXT NOT NULL,
    amount_paid NUMERIC(12, 2)
)
"""

CREATE_EXPENSES_SQL = """
CREATE TABLE IF NOT EXISTS expenses (
    id TEXT PRIMARY KEY,
    title TEXT NOT NULL,
    amount NUMERIC(12, 2) NOT NULL,
    expense_date TEXT NOT NULL,
    category TEXT NOT NULL,
    notes TEXT
)
"""

DELETE_CLIENT_ORDERS_SQL = text("DELETE FROM orders WHERE client_id = :client_id")


class _Table:
    """Prebuilt statements for one records table."""

    def __init__(self, name: str, record_type: str, specs, order_by: str) -> None:
        columns = [spec.column for spec in specs]
        assignments = ", ".join(
            f"{column} = :{column}" for column in columns if column != "id"
        )
        self.name = name
        self.record_type = record_type
        self.specs = specs
        self.select_all = text(
            f"SELECT {', '.join(columns)} FROM {name} ORDER BY {order_by}, id"
        )
        self.select_one = text(
            f"SELECT {', '.join(columns)} FROM {name} WHERE id = :id"
        )
        self.insert = text(
            f"INSERT INTO {name} ({', '.join(columns)}) "
            f"VALUES ({', '.join(':' + column for column in columns)})"
        )
        self.update = text(f"UPDATE {name} SET {assignments} WHERE id = :id")
        self.delete = text(f"DELETE FROM {name} WHERE id = :id")


CLIENTS_TABLE = _Table("clients", "client", CLIENT_FIELDS, "created_at")
ORDERS_TABLE = _Table("orders", "order", ORDER_FIELDS, "created_at")
EXPENSES_TABLE = _Table("expenses", "expense", EXPENSE_FIELDS, "expense_date")

_READERS = {
    "client": client_from_mapping,
    "order": order_from_mapping,
    "expense": expense_from_mapping,
}


class SqlAlchemyRecordStore(RecordStorePort):
    """Record Store backed by a SQL database through SQLAlchemy Core."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        cascade_client_orders: bool = True,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_record_id,
    ) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the records engine.
            cascade_client_orders: Delete a client's orders with the client.
            clock: Source of ``created_at`` timestamps.
            id_factory: Source of record ids.
        """
        self._db_port = db_port
        self._cascade_client_orders = cascade_client_orders
        self._clock = clock
        self._id_factory = id_factory

    def ensure_schema(self) -> None:
        """Create the records tables if they do not exist."""
        with self._transaction() as conn:
            conn.exec_driver_sql(CREATE_CLIENTS_SQL)
            conn.exec_driver_sql(CREATE_ORDERS_SQL)
            conn.exec_driver_sql(CREATE_EXPENSES_SQL)

    @contextmanager
    def _transaction(self) -> Iterator[Connection]:
        engine = self._db_port.get_records_engine()
        try:
            with engine.begin() as conn:
                yield conn
        except SQLAlchemyError as exc:
            raise StoreError(f"Records database operation failed: {exc}") from exc

    def _to_record(self, table: _Table, row):
        try:
            return _READERS[table.record_type](row._mapping)
        except (KeyError, TypeError, ValueError, ArithmeticError) as exc:
            raise StoreError(
                f"Malformed {table.record_type} row in {table.name}: {exc!r}"
            ) from exc

    def _list(self, table: _Table) -> list:
        with self._transaction() as conn:
            rows = conn.execute(table.select_all).all()
        return [self._to_record(table, row) for row in rows]

    def _insert(self, table: _Table, record):
        with self._transaction() as conn:
            conn.execute(table.insert, to_row(record, table.specs))
        return record

    def _update(self, table: _Table, record_id: str, changes: Mapping[str, Any]):
        validate_changes(table.record_type, changes)
        normalized = {
            name: ensure_utc(value) if isinstance(value, datetime) else value
            for name, value in changes.items()
        }
        with self._transaction() as conn:
            row = conn.execute(table.select_one, {"id": record_id}).first()
            if row is None:
                raise NotFoundError(table.record_type.capitalize(), record_id)
            updated = replace(self._to_record(table, row), **normalized)
            conn.execute(table.update, to_row(updated, table.specs))
        return updated

    def _delete(self, table: _Table, record_id: str) -> None:
        with self._transaction() as conn:
            result = conn.execute(table.delete, {"id": record_id})
            if result.rowcount == 0:
                raise NotFoundError(table.record_type.capitalize(), record_id)

    # Clients

    def list_clients(self) -> list[Client]:
        return self._list(CLIENTS_TABLE)

    def insert_client(self, draft: NewClient) -> Client:
        client = Client(
            id=self._id_factory(),
            created_at=ensure_utc(self._clock()),
            **asdict(draft),
        )
        return self._insert(CLIENTS_TABLE, client)

    def update_client(
        self,
        client_id: str,
        changes: Mapping[str, Any],
    ) -> Client:
        return self._update(CLIENTS_TABLE, client_id, changes)

    def delete_client(self, client_id: str) -> None:
        with self._transaction() as conn:
            if self._cascade_client_orders:
                conn.execute(DELETE_CLIENT_ORDERS_SQL, {"client_id": client_id})
            result = conn.execute(CLIENTS_TABLE.delete, {"id": client_id})
            if result.rowcount == 0:
                raise NotFoundError("Client", client_id)

    # Orders

    def list_orders(self) -> list[Order]:
        return self._list(ORDERS_TABLE)

    def insert_order(self, draft: NewOrder) -> Order:
        fields = asdict(draft)
        fields["deadline"] = ensure_utc(draft.deadline)
        order = Order(
            id=self._id_factory(),
            status=ORDER_STATUS_PENDING,
            created_at=ensure_utc(self._clock()),
            **fields,
        )
        return self._insert(ORDERS_TABLE, order)

    def update_order(self, order_id: str, changes: Mapping[str, Any]) -> Order:
        return self._update(ORDERS_TABLE, order_id, changes)

    def delete_order(self, order_id: str) -> None:
        self._delete(ORDERS_TABLE, order_id)

    # Expenses

    def list_expenses(self) -> list[Expense]:
        return self._list(EXPENSES_TABLE)

    def insert_expense(self, draft: NewExpense) -> Expense:
        fields = asdict(draft)
        fields["date"] = ensure_utc(draft.date)
        expense = Expense(id=self._id_factory(), **fields)
        return self._insert(EXPENSES_TABLE, expense)

    def update_expense(
        self,
        expense_id: str,
        changes: Mapping[str, Any],
    ) -> Expense:
        return self._update(EXPENSES_TABLE, expense_id, changes)

    def delete_expense(self, expense_id: str) -> None:
        self._delete(EXPENSES_TABLE, expense_id)


__all__ = [
    "SqlAlchemyRecordStore",
    "CREATE_CLIENTS_SQL",
    "CREATE_ORDERS_SQL",
    "CREATE_EXPENSES_SQL",
]
