"""Domain constants for project financial summaries."""

from decimal import Decimal

ZERO = Decimal("0")
HUNDRED = Decimal("100")

PAYMENT_TYPE_ALIASES = {
    "fixed": "fixed",
    "single": "fixed",
    "installment": "installment",
}


__all__ = ["ZERO", "HUNDRED", "PAYMENT_TYPE_ALIASES"]
