"""Use case to total every project of an owner."""

from budget_tracker.application.ports.project_repository import (
    ProjectRepositoryPort,
)
from budget_tracker.application.use_cases.get_financial_summary import (
    GetFinancialSummaryUseCase,
)
from budget_tracker.domain.models import PortfolioTotals
from budget_tracker.domain.services.finance import compute_portfolio_totals
from budget_tracker.infrastructure.logging.logger import get_app_logger


class GetPortfolioTotalsUseCase:
    """Sum the financial summaries of an owner's projects."""

    def __init__(
        self,
        project_repository: ProjectRepositoryPort,
        summary_use_case: GetFinancialSummaryUseCase,
        logger=None,
    ) -> None:
        self._projects = project_repository
        self._summaries = summary_use_case
        self._logger = logger or get_app_logger()

    def execute(self, owner_id: str) -> PortfolioTotals:
        """Return portfolio totals for an owner.

        Args:
            owner_id: Identifier of the owning user.

        Returns:
            PortfolioTotals: Budget and received totals across projects.
        """
        projects = self._projects.list_by_owner(owner_id)
        summaries = [self._summaries.execute(project.id) for project in projects]
        totals = compute_portfolio_totals(owner_id, summaries)
        self._logger.info(
            f"Portfolio totals computed for owner {owner_id}: "
            f"projects={totals.projects_count}, "
            f"received={totals.total_received_sum}"
        )
        return totals


__all__ = ["GetPortfolioTotalsUseCase"]
