"""Tests for the revenue recognition policy."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from bizdesk.domain.models import Order
from bizdesk.domain.services.revenue import DEFAULT_REVENUE_POLICY, RevenuePolicy


def _order(payment_status: str, cost: str = "1000", amount_paid=None) -> Order:
    moment = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return Order(
        id="o1",
        client_id="c1",
        title="Logo",
        description="",
        deadline=moment,
        cost=Decimal(cost),
        status="pending",
        payment_status=payment_status,
        created_at=moment,
        amount_paid=amount_paid,
    )


def test_unpaid_orders_recognize_nothing() -> None:
    """Unpaid orders contribute zero under every rule."""
    order = _order("unpaid", amount_paid=Decimal("300"))

    assert DEFAULT_REVENUE_POLICY.recognized(order) == Decimal("0")
    assert RevenuePolicy("amount_paid").recognized(order) == Decimal("0")


def test_paid_orders_recognize_full_cost() -> None:
    """Paid orders contribute their cost exactly."""
    order = _order("paid", cost="52.99")

    assert DEFAULT_REVENUE_POLICY.recognized(order) == Decimal("52.99")
    assert RevenuePolicy("amount_paid").recognized(order) == Decimal("52.99")


def test_partial_orders_use_half_of_cost_by_default() -> None:
    """The default rule counts partial orders at half their cost."""
    order = _order("partial", cost="500", amount_paid=Decimal("100"))

    assert DEFAULT_REVENUE_POLICY.recognized(order) == Decimal("250")


def test_amount_paid_rule_uses_tracked_amount() -> None:
    """The amount_paid rule counts what was actually received."""
    policy = RevenuePolicy("amount_paid")

    assert policy.recognized(
        _order("partial", cost="500", amount_paid=Decimal("100"))
    ) == Decimal("100")
    assert policy.recognized(_order("partial", cost="500")) == Decimal("250")


def test_unknown_rule_is_rejected() -> None:
    """Unsupported rule names should raise at construction."""
    with pytest.raises(ValueError):
        RevenuePolicy("whatever")


def test_partial_orders_keep_odd_cents_exact() -> None:
    assert DEFAULT_REVENUE_POLICY.recognized(
        _order("partial", cost="52.99")
    ) == Decimal("26.495")
