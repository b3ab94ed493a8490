"""Write-time validation for record fields.

Validation runs before a write reaches the Record Store. Aggregation code
assumes snapshots are well-formed and does not re-validate.
"""

import re
from collections.abc import Mapping
from dataclasses import fields
from datetime import datetime
from decimal import Decimal
from typing import Any

from bizdesk.domain.constants import (
    EXPENSE_CATEGORIES,
    ORDER_STATUSES,
    PAYMENT_STATUSES,
)
from bizdesk.domain.errors import ValidationError
from bizdesk.domain.models import (
    Client,
    Expense,
    NewClient,
    NewExpense,
    NewOrder,
    Order,
)

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

_RECORD_TYPES = {"client": Client, "order": Order, "expense": Expense}
_IMMUTABLE_FIELDS = ("id", "created_at")


def _require_text(value: str | None, field: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} is required", field=field)


def _require_timestamp(value: Any, field: str) -> None:
    if not isinstance(value, datetime):
        raise ValidationError(f"{field} must be a timestamp", field=field)


def _require_decimal(value: Any, field: str) -> None:
    if not isinstance(value, Decimal):
        raise ValidationError(f"{field} must be a decimal amount", field=field)


def _require_choice(value: str, choices: tuple[str, ...], field: str) -> None:
    if value not in choices:
        raise ValidationError(
            f"{field} must be one of {', '.join(choices)}; got '{value}'",
            field=field,
        )


def _validate_client_fields(record: Client | NewClient) -> None:
    _require_text(record.name, "name")
    if not _EMAIL_PATTERN.match(record.email or ""):
        raise ValidationError(
            f"Malformed email address: '{record.email}'",
            field="email",
        )


def _validate_order_fields(record: Order | NewOrder) -> None:
    _require_text(record.client_id, "client_id")
    _require_text(record.title, "title")
    _require_timestamp(record.deadline, "deadline")
    _require_decimal(record.cost, "cost")
    if record.cost < 0:
        raise ValidationError("cost must not be negative", field="cost")
    _require_choice(record.payment_status, PAYMENT_STATUSES, "payment_status")
    if record.amount_paid is not None:
        _require_decimal(record.amount_paid, "amount_paid")
        if record.amount_paid < 0 or record.amount_paid > record.cost:
            raise ValidationError(
                "amount_paid must be between 0 and cost",
                field="amount_paid",
            )


def _validate_expense_fields(record: Expense | NewExpense) -> None:
    _require_text(record.title, "title")
    _require_decimal(record.amount, "amount")
    if record.amount <= 0:
        raise ValidationError("amount must be positive", field="amount")
    _require_timestamp(record.date, "date")
    _require_choice(record.category, EXPENSE_CATEGORIES, "category")


def validate_new_client(draft: NewClient) -> None:
    _validate_client_fields(draft)


def validate_new_order(draft: NewOrder) -> None:
    _validate_order_fields(draft)


def validate_new_expense(draft: NewExpense) -> None:
    _validate_expense_fields(draft)


def validate_client(client: Client) -> None:
    _validate_client_fields(client)


def validate_order(order: Order) -> None:
    _validate_order_fields(order)
    _require_choice(order.status, ORDER_STATUSES, "status")


def validate_expense(expense: Expense) -> None:
    _validate_expense_fields(expense)


def validate_changes(record_type: str, changes: Mapping[str, Any]) -> None:
    """Reject unknown fields and changes to immutable fields.

    Args:
        record_type: ``client``, ``order`` or ``expense``.
        changes: Field name to new value.

    Raises:
        ValidationError: On an empty change set, an unknown field, or an
            attempt to change ``id`` or ``created_at``.
    """
    if not changes:
        raise ValidationError("No fields to update")
    known = {field.name for field in fields(_RECORD_TYPES[record_type])}
    for name in changes:
        if name in _IMMUTABLE_FIELDS:
            raise ValidationError(f"{name} cannot be changed", field=name)
        if name not in known:
            raise ValidationError(
                f"Unknown {record_type} field: {name}",
                field=name,
            )


__all__ = [
    "validate_new_client",
    "validate_new_order",
    "validate_new_expense",
    "validate_client",
    "validate_order",
    "validate_expense",
    "validate_changes",
]
