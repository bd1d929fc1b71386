"""Use cases for project team assignments.

Assignments replace the whole team of a project. They never touch the
transaction store or the summary cache.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from budget_tracker.application.ports.project_repository import (
    ProjectRepositoryPort,
)
from budget_tracker.application.ports.team_assignment_repository import (
    TeamAssignmentRepositoryPort,
)
from budget_tracker.application.ports.team_member_repository import (
    TeamMemberRepositoryPort,
)
from budget_tracker.domain.exceptions import InvalidInput
from budget_tracker.domain.services.normalization import normalize_member_ids
from budget_tracker.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class AssignTeamMembersResult:
    """Result of a team replacement.

    Attributes:
        project_id: Project whose team was replaced.
        member_ids: Members assigned after the operation, sorted.
        added_count: Number of new links.
        removed_count: Number of dropped links.
    """

    project_id: str
    member_ids: list[str]
    added_count: int
    removed_count: int


class AssignTeamMembersUseCase:
    """Replace the team of a project with a given set of members."""

    def __init__(
        self,
        project_repository: ProjectRepositoryPort,
        team_repository: TeamAssignmentRepositoryPort,
        member_repository: TeamMemberRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            project_repository: Port used to check that the project exists.
            team_repository: Port reading and writing assignment links.
            member_repository: Port used to check that the members exist.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._projects = project_repository
        self._teams = team_repository
        self._members = member_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        project_id: str,
        team_member_ids: Iterable[str],
    ) -> AssignTeamMembersResult:
        """Assign exactly the given members to the project.

        Args:
            project_id: Identifier of the project.
            team_member_ids: Members that should form the team. An empty
                collection clears the team.

        Returns:
            AssignTeamMembersResult: Resulting team and change counts.

        Raises:
            NotFound: If the project does not exist.
            InvalidInput: If a member id is unknown.
        """
        self._projects.get_by_id(project_id)
        requested = normalize_member_ids(team_member_ids)
        missing = requested - self._members.list_existing_ids(requested)
        if missing:
            self._logger.error(
                f"Cannot assign unknown members to project {project_id}: "
                f"{sorted(missing)}"
            )
            raise InvalidInput(f"Unknown team members: {sorted(missing)}")

        change = self._teams.replace_members(project_id, requested)
        if change.is_noop:
            self._logger.info(f"Team of project {project_id} unchanged")
        else:
            self._logger.info(
                f"Team of project {project_id} replaced: "
                f"added={len(change.to_add)}, removed={len(change.to_remove)}"
            )
        return AssignTeamMembersResult(
            project_id=project_id,
            member_ids=sorted(change.desired),
            added_count=len(change.to_add),
            removed_count=len(change.to_remove),
        )


class GetProjectTeamUseCase:
    """Return the members assigned to a project."""

    def __init__(
        self,
        project_repository: ProjectRepositoryPort,
        team_repository: TeamAssignmentRepositoryPort,
    ) -> None:
        self._projects = project_repository
        self._teams = team_repository

    def execute(self, project_id: str) -> list[str]:
        self._projects.get_by_id(project_id)
        return sorted(self._teams.list_member_ids(project_id))


__all__ = [
    "AssignTeamMembersResult",
    "AssignTeamMembersUseCase",
    "GetProjectTeamUseCase",
]
