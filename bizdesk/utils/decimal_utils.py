"""Helpers for Decimal normalization."""

from decimal import Decimal

ZERO = Decimal("0")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Floats are converted through ``str`` so that ``52.99`` stays ``52.99``
    instead of its binary expansion.

    Args:
        value: Raw numeric value from storage rows, JSON documents or callers.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def coerce_optional_decimal(value) -> Decimal | None:
    """Like coerce_decimal, but keep missing values missing."""
    if value is None or value == "":
        return None
    return coerce_decimal(value)


def sum_decimals(values) -> Decimal:
    """Sum an iterable of Decimals starting from an exact zero."""
    return sum(values, ZERO)


__all__ = ["ZERO", "coerce_decimal", "coerce_optional_decimal", "sum_decimals"]
