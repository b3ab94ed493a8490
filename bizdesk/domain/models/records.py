"""Canonical record types for clients, orders and expenses.

Every layer above the persistence adapters works with these dataclasses only;
field naming conventions used by storage backends are translated in
``bizdesk.infrastructure.record_mapping``.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class Client:
    """A customer of the business.

    Attributes:
        id: Opaque unique identifier assigned by the store.
        name: Display name.
        email: Contact email, expected well-formed.
        phone: Contact phone number.
        preferred_payment_method: Free-text label such as "Bank Transfer".
        notes: Optional free-text notes.
        created_at: Creation timestamp, immutable once set.
    """

    id: str
    name: str
    email: str
    phone: str
    preferred_payment_method: str
    notes: str
    created_at: datetime


@dataclass(frozen=True)
class Order:
    """A piece of work ordered by a client.

    Attributes:
        id: Opaque unique identifier assigned by the store.
        client_id: Non-owning reference to a Client; may dangle.
        title: Short title.
        description: Longer description.
        deadline: Due timestamp.
        cost: Non-negative amount billed.
        status: One of pending, complete, overdue.
        payment_status: One of paid, unpaid, partial.
        created_at: Creation timestamp, immutable once set.
        amount_paid: Amount received so far, when tracked.
    """

    id: str
    client_id: str
    title: str
    description: str
    deadline: datetime
    cost: Decimal
    status: str
    payment_status: str
    created_at: datetime
    amount_paid: Decimal | None = None

    @property
    def remaining_amount(self) -> Decimal:
        """Return cost minus the tracked amount paid."""
        return self.cost - (self.amount_paid or Decimal("0"))


@dataclass(frozen=True)
class Expense:
    """A business expense."""

    id: str
    title: str
    amount: Decimal
    date: datetime
    category: str
    notes: str = ""


@dataclass(frozen=True)
class NewClient:
    """Fields supplied by callers when creating a client."""

    name: str
    email: str
    phone: str = ""
    preferred_payment_method: str = ""
    notes: str = ""


@dataclass(frozen=True)
class NewOrder:
    """Fields supplied by callers when creating an order.

    New orders always start with status ``pending``.
    """

    client_id: str
    title: str
    deadline: datetime
    cost: Decimal
    description: str = ""
    payment_status: str = "unpaid"
    amount_paid: Decimal | None = None


@dataclass(frozen=True)
class NewExpense:
    """Fields supplied by callers when creating an expense."""

    title: str
    amount: Decimal
    date: datetime
    category: str
    notes: str = ""


__all__ = [
    "Client",
    "Order",
    "Expense",
    "NewClient",
    "NewOrder",
    "NewExpense",
]
