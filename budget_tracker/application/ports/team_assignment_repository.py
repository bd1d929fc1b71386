"""Port for project team assignments."""

from collections.abc import Iterable
from typing import Protocol

from budget_tracker.domain.policies import AssignmentChange


class TeamAssignmentRepositoryPort(Protocol):
    """Port exposing the many-to-many link between projects and members."""

    def list_member_ids(self, project_id: str) -> set[str]:
        """Return the ids of members assigned to the project."""

    def list_project_ids(self, team_member_id: str) -> set[str]:
        """Return the ids of projects the member is assigned to."""

    def replace_members(
        self,
        project_id: str,
        member_ids: Iterable[str],
    ) -> AssignmentChange:
        """Replace the team of a project in one atomic step.

        Reading the current team, planning the change and applying it must
        happen in the same transaction, so concurrent replacements of one
        project serialize instead of merging.

        Returns:
            AssignmentChange: The change that was applied.
        """


__all__ = ["TeamAssignmentRepositoryPort"]
