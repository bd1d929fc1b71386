"""Use case to build a project overview with installment counts."""

from datetime import date

from budget_tracker.application.ports.installment_repository import (
    InstallmentRepositoryPort,
)
from budget_tracker.application.ports.project_repository import (
    ProjectRepositoryPort,
)
from budget_tracker.application.use_cases.get_financial_summary import (
    GetFinancialSummaryUseCase,
)
from budget_tracker.domain.models import ProjectOverview
from budget_tracker.domain.services.finance import build_project_overview


class GetProjectOverviewUseCase:
    """Combine the financial summary with the installment plan counts.

    The summary and the installment counts come from separate reads and are
    merged as scalars.
    """

    def __init__(
        self,
        project_repository: ProjectRepositoryPort,
        installment_repository: InstallmentRepositoryPort,
        summary_use_case: GetFinancialSummaryUseCase,
    ) -> None:
        """Initialize the use case.

        Args:
            project_repository: Port reading projects.
            installment_repository: Port reading installment plans.
            summary_use_case: Use case providing the financial summary.
        """
        self._projects = project_repository
        self._installments = installment_repository
        self._summaries = summary_use_case

    def execute(
        self,
        project_id: str,
        today: date | None = None,
    ) -> ProjectOverview:
        """Return the overview of a project.

        Args:
            project_id: Identifier of the project.
            today: Reference date for overdue detection; defaults to today.

        Returns:
            ProjectOverview: Summary plus installment counts.
        """
        project = self._projects.get_by_id(project_id)
        summary = self._summaries.execute(project_id)
        installments = self._installments.list_by_project(project_id)
        return build_project_overview(
            project,
            summary,
            installments,
            today=today or date.today(),
        )


__all__ = ["GetProjectOverviewUseCase"]
