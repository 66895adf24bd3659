"""Helpers for Decimal normalization."""

from decimal import Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from a JSON payload or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Expected a number, got {value!r}")
    return Decimal(str(value))


def safe_ratio(numerator: Decimal, denominator: Decimal) -> Decimal:
    """Return numerator / denominator, or zero when the denominator is zero."""
    if denominator == 0:
        return Decimal("0")
    return numerator / denominator


def sum_decimals(values) -> Decimal:
    """Sum an iterable of Decimal values starting from Decimal zero."""
    return sum(values, Decimal("0"))


__all__ = ["coerce_decimal", "safe_ratio", "sum_decimals"]
