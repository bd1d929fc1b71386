"""Invalidation hooks for cached financial summaries."""

from budget_tracker.application.ports.summary_cache import SummaryCachePort
from budget_tracker.infrastructure.logging.logger import get_app_logger


class FinancialSummaryInvalidator:
    """Mark cached summaries stale after writes that can change them.

    Callers must invoke the hook before acknowledging the write so the next
    read by the same actor recomputes from the committed state.
    """

    def __init__(self, cache: SummaryCachePort, logger=None) -> None:
        """Initialize the invalidator.

        Args:
            cache: Projection cache holding the summaries.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._cache = cache
        self._logger = logger or get_app_logger()

    def on_transaction_changed(self, project_id: str) -> None:
        """Handle a transaction create, update or delete."""
        self._cache.invalidate(project_id)
        self._logger.debug(
            f"Summary invalidated after transaction change: {project_id}"
        )

    def on_project_budget_changed(self, project_id: str) -> None:
        """Handle an edit of the project's total budget."""
        self._cache.invalidate(project_id)
        self._logger.debug(
            f"Summary invalidated after budget change: {project_id}"
        )


__all__ = ["FinancialSummaryInvalidator"]
