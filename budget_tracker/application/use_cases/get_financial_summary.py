"""Use case to read the financial summary of a project."""

from budget_tracker.application.ports.project_repository import (
    ProjectRepositoryPort,
)
from budget_tracker.application.ports.summary_cache import SummaryCachePort
from budget_tracker.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from budget_tracker.domain.exceptions import InvalidInput
from budget_tracker.domain.models import FinancialSummary
from budget_tracker.domain.services.finance import summarize
from budget_tracker.infrastructure.logging.logger import get_app_logger


class GetFinancialSummaryUseCase:
    """Return the authoritative financial summary of a project.

    Summaries are served from the projection cache when one is supplied and
    computed from the stores otherwise.
    """

    def __init__(
        self,
        project_repository: ProjectRepositoryPort,
        transaction_repository: TransactionRepositoryPort,
        cache: SummaryCachePort | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            project_repository: Port reading projects.
            transaction_repository: Port reading project transactions.
            cache: Optional projection cache; None recomputes on every call.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._projects = project_repository
        self._transactions = transaction_repository
        self._cache = cache
        self._logger = logger or get_app_logger()

    def execute(self, project_id: str) -> FinancialSummary:
        """Return the summary of a project.

        Args:
            project_id: Identifier of the project.

        Returns:
            FinancialSummary: Received, remaining and completion figures.

        Raises:
            NotFound: If the project does not exist.
            InvalidInput: If the stores returned rows violating the
                aggregation contract.
        """
        if self._cache is None:
            return self.compute(project_id)
        return self._cache.get_or_compute(
            project_id,
            lambda: self.compute(project_id),
        )

    def compute(self, project_id: str) -> FinancialSummary:
        """Compute the summary from the current store state."""
        project = self._projects.get_by_id(project_id)
        transactions = self._transactions.list_by_project(project_id)
        try:
            summary = summarize(project, transactions, self._logger)
        except InvalidInput as exc:
            self._logger.error(
                f"Financial summary contract violated for project "
                f"{project_id}: {exc}"
            )
            raise
        self._logger.debug(
            f"Summary computed for project {project_id}: "
            f"received={summary.received_amount}, "
            f"remaining={summary.remaining_amount}"
        )
        return summary


__all__ = ["GetFinancialSummaryUseCase"]
