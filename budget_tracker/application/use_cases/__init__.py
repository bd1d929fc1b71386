"""Application use cases package."""

from .assign_team_members import (
    AssignTeamMembersResult,
    AssignTeamMembersUseCase,
    GetProjectTeamUseCase,
)
from .get_financial_summary import GetFinancialSummaryUseCase
from .get_installment_progress import GetInstallmentProgressUseCase
from .get_payment_timeline import GetPaymentTimelineUseCase
from .get_portfolio_totals import GetPortfolioTotalsUseCase
from .get_project_overview import GetProjectOverviewUseCase
from .get_team_member_stats import GetTeamMemberStatsUseCase
from .invalidate_financial_summary import FinancialSummaryInvalidator

__all__ = [
    "AssignTeamMembersResult",
    "AssignTeamMembersUseCase",
    "GetProjectTeamUseCase",
    "GetFinancialSummaryUseCase",
    "GetInstallmentProgressUseCase",
    "GetPaymentTimelineUseCase",
    "GetPortfolioTotalsUseCase",
    "GetProjectOverviewUseCase",
    "GetTeamMemberStatsUseCase",
    "FinancialSummaryInvalidator",
]
