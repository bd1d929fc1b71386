"""Use case to report project statistics per team member.

Each member's projects are read from the assignment links, and each project is
summarized on its own. The assignment relation is never joined against
transactions or installments, so a member on a project with many installments
still counts that project's budget once.
"""

from budget_tracker.application.ports.team_assignment_repository import (
    TeamAssignmentRepositoryPort,
)
from budget_tracker.application.ports.team_member_repository import (
    TeamMemberRepositoryPort,
)
from budget_tracker.application.use_cases.get_financial_summary import (
    GetFinancialSummaryUseCase,
)
from budget_tracker.domain.models import FinancialSummary, TeamMemberStats
from budget_tracker.domain.services.finance import compute_team_member_stats
from budget_tracker.infrastructure.logging.logger import get_app_logger


class GetTeamMemberStatsUseCase:
    """Compute project counts and budgets for every member of an owner."""

    def __init__(
        self,
        member_repository: TeamMemberRepositoryPort,
        team_repository: TeamAssignmentRepositoryPort,
        summary_use_case: GetFinancialSummaryUseCase,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            member_repository: Port listing the owner's team members.
            team_repository: Port reading assignment links.
            summary_use_case: Use case providing per-project summaries.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._members = member_repository
        self._teams = team_repository
        self._summaries = summary_use_case
        self._logger = logger or get_app_logger()

    def execute(self, owner_id: str) -> list[TeamMemberStats]:
        """Return statistics for each member managed by the owner.

        Args:
            owner_id: Identifier of the owning user.

        Returns:
            list[TeamMemberStats]: One entry per member, sorted by name.
        """
        members = self._members.list_by_owner(owner_id)
        summaries: dict[str, FinancialSummary] = {}
        stats = []
        for member in members:
            project_ids = sorted(self._teams.list_project_ids(member.id))
            for project_id in project_ids:
                if project_id not in summaries:
                    summaries[project_id] = self._summaries.execute(project_id)
            stats.append(
                compute_team_member_stats(
                    member,
                    [summaries[project_id] for project_id in project_ids],
                )
            )
        self._logger.info(
            f"Team member stats computed for owner {owner_id}: "
            f"members={len(stats)}, projects={len(summaries)}"
        )
        return sorted(stats, key=lambda row: (row.name, row.team_member_id))


__all__ = ["GetTeamMemberStatsUseCase"]
