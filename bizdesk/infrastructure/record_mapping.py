"""Mapping between canonical records and storage field conventions.

Two naming conventions exist in stored data: ``camelCase`` documents written
by the local JSON store (``clientId``, ``paymentStatus``) and ``snake_case``
rows in the relational store (``client_id``, ``payment_status``). Readers here
accept either convention; writers emit exactly one. Nothing above the
infrastructure layer sees anything but the canonical dataclasses.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from bizdesk.domain.models import Client, Expense, Order
from bizdesk.utils.datetime_utils import format_timestamp, parse_timestamp
from bizdesk.utils.decimal_utils import coerce_decimal, coerce_optional_decimal

TEXT = "text"
TIMESTAMP = "timestamp"
DECIMAL = "decimal"
OPTIONAL_DECIMAL = "optional_decimal"


@dataclass(frozen=True)
class FieldSpec:
    """How one record attribute is named and typed in storage."""

    attr: str
    document_key: str
    column: str
    kind: str = TEXT
    default: Any = None


CLIENT_FIELDS = (
    FieldSpec("id", "id", "id"),
    FieldSpec("name", "name", "name"),
    FieldSpec("email", "email", "email"),
    FieldSpec("phone", "phone", "phone", default=""),
    FieldSpec(
        "preferred_payment_method",
        "preferredPaymentMethod",
        "preferred_payment_method",
        default="",
    ),
    FieldSpec("notes", "notes", "notes", default=""),
    FieldSpec("created_at", "createdAt", "created_at", TIMESTAMP),
)

ORDER_FIELDS = (
    FieldSpec("id", "id", "id"),
    FieldSpec("client_id", "clientId", "client_id"),
    FieldSpec("title", "title", "title"),
    FieldSpec("description", "description", "description", default=""),
    FieldSpec("deadline", "deadline", "deadline", TIMESTAMP),
    FieldSpec("cost", "cost", "cost", DECIMAL),
    FieldSpec("status", "status", "status"),
    FieldSpec("payment_status", "paymentStatus", "payment_status"),
    FieldSpec("created_at", "createdAt", "created_at", TIMESTAMP),
    FieldSpec("amount_paid", "amountPaid", "amount_paid", OPTIONAL_DECIMAL),
)

EXPENSE_FIELDS = (
    FieldSpec("id", "id", "id"),
    FieldSpec("title", "title", "title"),
    FieldSpec("amount", "amount", "amount", DECIMAL),
    FieldSpec("date", "date", "expense_date", TIMESTAMP),
    FieldSpec("category", "category", "category"),
    FieldSpec("notes", "notes", "notes", default=""),
)

_MISSING = object()


def _read_value(spec: FieldSpec, data: Mapping[str, Any]) -> Any:
    raw = _MISSING
    for key in (spec.attr, spec.document_key, spec.column):
        if key in data:
            raw = data[key]
            break
    if raw is _MISSING or raw is None:
        if spec.kind == OPTIONAL_DECIMAL:
            return None
        if spec.default is not None:
            return spec.default
        raise KeyError(spec.attr)
    if spec.kind == TIMESTAMP:
        return parse_timestamp(raw)
    if spec.kind == DECIMAL:
        return coerce_decimal(raw)
    if spec.kind == OPTIONAL_DECIMAL:
        return coerce_optional_decimal(raw)
    return str(raw)


def _write_value(spec: FieldSpec, value: Any) -> Any:
    if value is None:
        return None
    if spec.kind == TIMESTAMP:
        return format_timestamp(value)
    if spec.kind in (DECIMAL, OPTIONAL_DECIMAL):
        return str(value)
    return value


def _from_mapping(record_type, specs, data: Mapping[str, Any]):
    return record_type(**{spec.attr: _read_value(spec, data) for spec in specs})


def client_from_mapping(data: Mapping[str, Any]) -> Client:
    """Build a Client from a camelCase document or snake_case row."""
    return _from_mapping(Client, CLIENT_FIELDS, data)


def order_from_mapping(data: Mapping[str, Any]) -> Order:
    """Build an Order from a camelCase document or snake_case row."""
    return _from_mapping(Order, ORDER_FIELDS, data)


def expense_from_mapping(data: Mapping[str, Any]) -> Expense:
    """Build an Expense from a camelCase document or snake_case row."""
    return _from_mapping(Expense, EXPENSE_FIELDS, data)


def to_document(record, specs) -> dict[str, Any]:
    """Serialize a record to a camelCase JSON-ready document."""
    return {
        spec.document_key: _write_value(spec, getattr(record, spec.attr))
        for spec in specs
    }


def to_row(record, specs) -> dict[str, Any]:
    """Serialize a record to snake_case column values for SQL binding."""
    return {
        spec.column: _write_value(spec, getattr(record, spec.attr))
        for spec in specs
    }


__all__ = [
    "FieldSpec",
    "CLIENT_FIELDS",
    "ORDER_FIELDS",
    "EXPENSE_FIELDS",
    "client_from_mapping",
    "order_from_mapping",
    "expense_from_mapping",
    "to_document",
    "to_row",
]
