"""SQLAlchemy-backed repository for project team assignments.

A replacement locks the project row first, so two replacements of the same
project run one after the other and the second reads the team the first one
wrote.
"""

from collections.abc import Iterable

from sqlalchemy import text

from budget_tracker.application.ports.database import DatabaseEnginePort
from budget_tracker.application.ports.team_assignment_repository import (
    TeamAssignmentRepositoryPort,
)
from budget_tracker.domain.exceptions import NotFound
from budget_tracker.domain.policies import (
    AssignmentChange,
    plan_assignment_change,
)


LOCK_PROJECT_SQL = text(
    """
    SELECT id
    FROM projects
    WHERE id = :project_id
    FOR UPDATE
    """
)

SELECT_PROJECT_MEMBERS_SQL = text(
    """
    SELECT team_member_id
    FROM project_team_members
    WHERE project_id = :project_id
    """
)

SELECT_MEMBER_PROJECTS_SQL = text(
    """
    SELECT project_id
    FROM project_team_members
    WHERE team_member_id = :team_member_id
    """
)

DELETE_PROJECT_MEMBER_SQL = text(
    """
    DELETE FROM project_team_members
    WHERE project_id = :project_id AND team_member_id = :team_member_id
    """
)

INSERT_PROJECT_MEMBER_SQL = text(
    """
    INSERT INTO project_team_members (project_id, team_member_id)
    VALUES (:project_id, :team_member_id)
    """
)


class SqlAlchemyTeamAssignmentRepository(TeamAssignmentRepositoryPort):
    """Repository backed by SQLAlchemy for project_team_members."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the budget engine.
        """
        self._db_port = db_port

    def list_member_ids(self, project_id: str) -> set[str]:
        """Return the ids of members assigned to the project."""
        engine = self._db_port.get_budget_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_PROJECT_MEMBERS_SQL,
                {"project_id": project_id},
            ).all()
        return {str(row.team_member_id) for row in rows}

    def list_project_ids(self, team_member_id: str) -> set[str]:
        """Return the ids of projects the member is assigned to."""
        engine = self._db_port.get_budget_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_MEMBER_PROJECTS_SQL,
                {"team_member_id": team_member_id},
            ).all()
        return {str(row.project_id) for row in rows}

    def replace_members(
        self,
        project_id: str,
        member_ids: Iterable[str],
    ) -> AssignmentChange:
        """Replace the project's team inside a single database transaction.

        Args:
            project_id: Identifier of the project.
            member_ids: Members that should form the team.

        Returns:
            AssignmentChange: The change that was applied.

        Raises:
            NotFound: If the project row does not exist.
        """
        engine = self._db_port.get_budget_engine()
        with engine.begin() as conn:
            locked = conn.execute(
                LOCK_PROJECT_SQL,
                {"project_id": project_id},
            ).first()
            if locked is None:
                raise NotFound("Project", project_id)
            rows = conn.execute(
                SELECT_PROJECT_MEMBERS_SQL,
                {"project_id": project_id},
            ).all()
            change = plan_assignment_change(
                project_id,
                (str(row.team_member_id) for row in rows),
                member_ids,
            )
            removals = [
                {"project_id": project_id, "team_member_id": member_id}
                for member_id in sorted(change.to_remove)
            ]
            additions = [
                {"project_id": project_id, "team_member_id": member_id}
                for member_id in sorted(change.to_add)
            ]
            if removals:
                conn.execute(DELETE_PROJECT_MEMBER_SQL, removals)
            if additions:
                conn.execute(INSERT_PROJECT_MEMBER_SQL, additions)
        return change


__all__ = [
    "SqlAlchemyTeamAssignmentRepository",
    "LOCK_PROJECT_SQL",
    "SELECT_PROJECT_MEMBERS_SQL",
    "SELECT_MEMBER_PROJECTS_SQL",
    "DELETE_PROJECT_MEMBER_SQL",
    "INSERT_PROJECT_MEMBER_SQL",
]
