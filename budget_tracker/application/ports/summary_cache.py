"""Port for the financial summary projection cache."""

from typing import Callable, Protocol

from budget_tracker.domain.models import FinancialSummary


class SummaryCachePort(Protocol):
    """Keyed store of financial summaries, one entry per project."""

    def get_or_compute(
        self,
        project_id: str,
        compute: Callable[[], FinancialSummary],
    ) -> FinancialSummary:
        """Return the fresh entry or compute, store and return a new one."""

    def invalidate(self, project_id: str) -> None:
        """Mark the entry of a project stale."""

    def clear(self) -> None:
        """Drop every entry."""


__all__ = ["SummaryCachePort"]
