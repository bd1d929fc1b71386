"""Domain normalization helpers."""

from collections.abc import Iterable

from budget_tracker.domain.constants import PAYMENT_TYPE_ALIASES
from budget_tracker.domain.exceptions import InvalidInput
from budget_tracker.domain.models import PaymentType


def normalize_payment_type(raw: str | PaymentType | None) -> PaymentType:
    """Normalize stored payment type values.

    Args:
        raw: Raw payment type from a repository. ``single`` is the legacy
            spelling of ``fixed``.

    Returns:
        PaymentType: Normalized payment type.

    Raises:
        InvalidInput: If the value is not a known payment type.
    """
    if isinstance(raw, PaymentType):
        return raw
    if not raw:
        return PaymentType.FIXED
    cleaned = raw.strip().lower()
    try:
        return PaymentType(PAYMENT_TYPE_ALIASES[cleaned])
    except KeyError:
        raise InvalidInput(f"Unknown payment type: {raw}") from None


def normalize_member_ids(member_ids: Iterable[str]) -> frozenset[str]:
    """Collapse team member ids into a set of stripped, non-empty ids."""
    cleaned = (str(member_id).strip() for member_id in member_ids)
    return frozenset(member_id for member_id in cleaned if member_id)


__all__ = ["normalize_payment_type", "normalize_member_ids"]
