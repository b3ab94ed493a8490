"""Order lifecycle: overdue detection, status transitions and payments."""

from collections.abc import Iterable, Mapping
from datetime import datetime
from decimal import Decimal
from typing import Any

from bizdesk.domain.constants import (
    ORDER_STATUS_COMPLETE,
    ORDER_STATUS_OVERDUE,
    ORDER_STATUS_PENDING,
    ORDER_STATUS_TRANSITIONS,
    ORDER_STATUSES,
    PAYMENT_STATUS_PAID,
    PAYMENT_STATUS_PARTIAL,
)
from bizdesk.domain.errors import InvalidStatusTransitionError, ValidationError
from bizdesk.domain.models import Order
from bizdesk.utils.datetime_utils import ensure_utc


def is_overdue(order: Order, now: datetime) -> bool:
    """Return True when the deadline has passed and the order is not done.

    Naive datetimes on either side are read as UTC.
    """
    if order.status == ORDER_STATUS_COMPLETE:
        return False
    return ensure_utc(order.deadline) < ensure_utc(now)


def find_orders_to_mark_overdue(
    orders: Iterable[Order],
    now: datetime,
) -> list[Order]:
    """Return persisted pending orders that are behaviorally overdue."""
    return [
        order
        for order in orders
        if order.status == ORDER_STATUS_PENDING and is_overdue(order, now)
    ]


def live_overdue_orders(
    orders: Iterable[Order],
    now: datetime,
) -> list[Order]:
    """Return orders persisted as overdue or whose deadline has passed."""
    return [
        order
        for order in orders
        if order.status == ORDER_STATUS_OVERDUE or is_overdue(order, now)
    ]


def check_status_transition(current: str, target: str) -> None:
    """Raise when ``current -> target`` is not an allowed transition.

    Setting the status an order already has is accepted as a no-op.

    Raises:
        ValidationError: When ``target`` is not a known status.
        InvalidStatusTransitionError: When the lifecycle forbids the move.
    """
    if target not in ORDER_STATUSES:
        raise ValidationError(f"Unknown order status: {target}", field="status")
    if current == target:
        return
    if (current, target) not in ORDER_STATUS_TRANSITIONS:
        raise InvalidStatusTransitionError(current, target)


def apply_payment(order: Order, amount: Decimal) -> dict[str, Any]:
    """Return the field changes recording a payment against ``order``.

    Args:
        order: Order receiving the payment.
        amount: Positive amount, at most the remaining balance.

    Returns:
        dict[str, Any]: ``amount_paid`` and ``payment_status`` updates.

    Raises:
        ValidationError: When the order is already paid or the amount is
            not positive or exceeds the remaining balance.
    """
    if order.payment_status == PAYMENT_STATUS_PAID:
        raise ValidationError(
            f"Order {order.id} is already paid",
            field="payment_status",
        )
    if amount <= 0:
        raise ValidationError("Payment amount must be positive", field="amount")
    remaining = order.remaining_amount
    if amount > remaining:
        raise ValidationError(
            f"Payment amount cannot exceed the remaining balance of "
            f"{remaining:.2f}",
            field="amount",
        )
    paid_total = (order.amount_paid or Decimal("0")) + amount
    payment_status = (
        PAYMENT_STATUS_PAID if paid_total >= order.cost else PAYMENT_STATUS_PARTIAL
    )
    return {"amount_paid": paid_total, "payment_status": payment_status}


def check_amount_paid_change(order: Order, changes: Mapping[str, Any]) -> None:
    """Raise when ``changes`` would lower or clear a tracked ``amount_paid``.

    Raises:
        ValidationError: When the new value is ``None`` or below the
            amount already recorded on ``order``.
    """
    if "amount_paid" not in changes or order.amount_paid is None:
        return
    new_amount = changes["amount_paid"]
    if new_amount is not None and not isinstance(new_amount, Decimal):
        return
    if new_amount is None or new_amount < order.amount_paid:
        raise ValidationError(
            f"amount_paid cannot go below {order.amount_paid:.2f}",
            field="amount_paid",
        )


__all__ = [
    "is_overdue",
    "find_orders_to_mark_overdue",
    "live_overdue_orders",
    "check_status_transition",
    "apply_payment",
    "check_amount_paid_change",
]
