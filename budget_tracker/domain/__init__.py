"""Domain package for business rules and core models."""

from .exceptions import BudgetTrackerError, InvalidInput, NotFound
from .models import (
    FinancialSummary,
    Installment,
    InstallmentProgress,
    PaymentTimelinePoint,
    PaymentType,
    PortfolioTotals,
    Project,
    ProjectOverview,
    TeamAssignment,
    TeamMember,
    TeamMemberStats,
    Transaction,
)
from .services import (
    build_payment_timeline,
    build_project_overview,
    compute_installment_progress,
    compute_portfolio_totals,
    compute_team_member_stats,
    deduplicate_transactions,
    summarize,
)
from .policies import AssignmentChange, plan_assignment_change

__all__ = [
    "BudgetTrackerError",
    "InvalidInput",
    "NotFound",
    "FinancialSummary",
    "Installment",
    "InstallmentProgress",
    "PaymentTimelinePoint",
    "PaymentType",
    "PortfolioTotals",
    "Project",
    "ProjectOverview",
    "TeamAssignment",
    "TeamMember",
    "TeamMemberStats",
    "Transaction",
    "build_payment_timeline",
    "build_project_overview",
    "compute_installment_progress",
    "compute_portfolio_totals",
    "compute_team_member_stats",
    "deduplicate_transactions",
    "summarize",
    "AssignmentChange",
    "plan_assignment_change",
]
