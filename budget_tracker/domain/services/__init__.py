"""Domain services package."""

from .finance import (
    build_payment_timeline,
    build_project_overview,
    completion_percentage,
    compute_installment_progress,
    compute_portfolio_totals,
    compute_team_member_stats,
    deduplicate_transactions,
    summarize,
)
from .normalization import normalize_member_ids, normalize_payment_type
from .validation import validate_project, validate_transactions_scope

__all__ = [
    "build_payment_timeline",
    "build_project_overview",
    "completion_percentage",
    "compute_installment_progress",
    "compute_portfolio_totals",
    "compute_team_member_stats",
    "deduplicate_transactions",
    "summarize",
    "normalize_member_ids",
    "normalize_payment_type",
    "validate_project",
    "validate_transactions_scope",
]
