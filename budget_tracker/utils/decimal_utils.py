"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal

TWO_PLACES = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_for_display(value: Decimal) -> Decimal:
    """Round a Decimal to two places for presentation."""
    return value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


__all__ = ["coerce_decimal", "round_for_display", "TWO_PLACES"]
