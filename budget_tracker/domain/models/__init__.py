"""Domain models package."""

from .finance import (
    FinancialSummary,
    InstallmentProgress,
    PaymentTimelinePoint,
    PortfolioTotals,
    ProjectOverview,
    TeamMemberStats,
)
from .projects import (
    Installment,
    PaymentType,
    Project,
    TeamAssignment,
    TeamMember,
    Transaction,
)

__all__ = [
    "FinancialSummary",
    "InstallmentProgress",
    "PaymentTimelinePoint",
    "PortfolioTotals",
    "ProjectOverview",
    "TeamMemberStats",
    "Installment",
    "PaymentType",
    "Project",
    "TeamAssignment",
    "TeamMember",
    "Transaction",
]
