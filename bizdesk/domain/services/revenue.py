"""Revenue recognition policy.

Two rules exist because earlier data only carried a payment status while
later data also tracks ``amount_paid``. A single policy instance is chosen
per process and handed to every report, so dashboard totals, profit/loss,
top clients and the client report always agree.
"""

from dataclasses import dataclass
from decimal import Decimal

from bizdesk.domain.constants import (
    PAYMENT_STATUS_PAID,
    PAYMENT_STATUS_PARTIAL,
    REVENUE_RULE_AMOUNT_PAID,
    REVENUE_RULE_HALF_OF_COST,
    REVENUE_RULES,
)
from bizdesk.domain.models import Order
from bizdesk.utils.decimal_utils import ZERO

_PARTIAL_DIVISOR = Decimal("2")


@dataclass(frozen=True)
class RevenuePolicy:
    """Compute the recognized revenue of an order.

    Attributes:
        rule: ``half_of_cost`` counts partial orders at 50% of cost;
            ``amount_paid`` counts them at their tracked ``amount_paid``
            (50% of cost when the field is absent).
    """

    rule: str = REVENUE_RULE_HALF_OF_COST

    def __post_init__(self) -> None:
        if self.rule not in REVENUE_RULES:
            raise ValueError(
                f"Unsupported revenue rule: {self.rule}. "
                f"Expected one of {', '.join(REVENUE_RULES)}."
            )

    def recognized(self, order: Order) -> Decimal:
        """Return the portion of ``order.cost`` counted as earned."""
        if order.payment_status == PAYMENT_STATUS_PAID:
            return order.cost
        if order.payment_status != PAYMENT_STATUS_PARTIAL:
            return ZERO
        if (
            self.rule == REVENUE_RULE_AMOUNT_PAID
            and order.amount_paid is not None
        ):
            return order.amount_paid
        return order.cost / _PARTIAL_DIVISOR


DEFAULT_REVENUE_POLICY = RevenuePolicy()


__all__ = ["RevenuePolicy", "DEFAULT_REVENUE_POLICY"]
