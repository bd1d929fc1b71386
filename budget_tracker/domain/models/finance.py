"""Domain models for project financial aggregates."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from budget_tracker.utils.decimal_utils import round_for_display


@dataclass(frozen=True)
class FinancialSummary:
    """Authoritative money figures for a single project.

    Attributes:
        project_id: Project the summary belongs to.
        total_budget: Budget of the project.
        received_amount: Sum of distinct transactions for the project.
        remaining_amount: Budget minus received; negative when overpaid.
        completion_percentage: Received share of the budget, unclamped.
        is_completed: Whether the received amount covers the budget.
        transactions_count: Number of distinct transactions.
        last_transaction_date: Latest transaction date, if any.
    """

    project_id: str
    total_budget: Decimal
    received_amount: Decimal
    remaining_amount: Decimal
    completion_percentage: Decimal
    is_completed: bool
    transactions_count: int = 0
    last_transaction_date: date | None = None

    @property
    def display_percentage(self) -> Decimal:
        """Return the completion percentage rounded to two places."""
        return round_for_display(self.completion_percentage)

    @property
    def is_overpaid(self) -> bool:
        """Return True when more was received than budgeted."""
        return self.remaining_amount < 0


@dataclass(frozen=True)
class InstallmentProgress:
    """Payment progress of a single installment.

    ``is_paid`` is the stored flag; ``is_fully_paid`` and ``is_overdue`` are
    derived from the amounts actually received.
    """

    installment_id: str
    installment_number: int
    amount: Decimal
    due_date: date
    is_paid: bool
    paid_amount: Decimal
    remaining_amount: Decimal
    is_fully_paid: bool
    is_overdue: bool
    days_until_due: int


@dataclass(frozen=True)
class ProjectOverview:
    """Financial summary combined with installment counts."""

    summary: FinancialSummary
    title: str
    payment_type: str
    total_installments: int
    paid_installments: int
    overdue_installments: int


@dataclass(frozen=True)
class PortfolioTotals:
    """Totals across every project of an owner."""

    owner_id: str
    projects_count: int
    completed_projects_count: int
    total_budget_sum: Decimal
    total_received_sum: Decimal

    @property
    def total_remaining_sum(self) -> Decimal:
        """Return total budget minus total received."""
        return self.total_budget_sum - self.total_received_sum


@dataclass(frozen=True)
class TeamMemberStats:
    """Project counts and budgets of a team member.

    Every project is counted once however many installments or transactions
    it has.
    """

    team_member_id: str
    name: str
    total_projects: int
    completed_projects: int
    active_projects: int
    total_completed_budget: Decimal
    total_active_budget: Decimal


@dataclass(frozen=True)
class PaymentTimelinePoint:
    """Single payment with the running total up to it."""

    transaction_id: str
    recorded_at: date | None
    amount: Decimal
    cumulative_amount: Decimal


__all__ = [
    "FinancialSummary",
    "InstallmentProgress",
    "ProjectOverview",
    "PortfolioTotals",
    "TeamMemberStats",
    "PaymentTimelinePoint",
]
