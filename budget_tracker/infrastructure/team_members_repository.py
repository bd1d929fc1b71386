"""SQLAlchemy-backed repository for the team member directory."""

from collections.abc import Iterable

from sqlalchemy import bindparam, text

from budget_tracker.application.ports.database import DatabaseEnginePort
from budget_tracker.application.ports.team_member_repository import (
    TeamMemberRepositoryPort,
)
from budget_tracker.domain.models import TeamMember


SELECT_OWNER_MEMBERS_SQL = text(
    """
    SELECT id, name, user_id, role, is_active
    FROM team_members
    WHERE user_id = :owner_id
    ORDER BY name, id
    """
)

SELECT_EXISTING_MEMBER_IDS_SQL = text(
    """
    SELECT id
    FROM team_members
    WHERE id IN :member_ids
    """
).bindparams(bindparam("member_ids", expanding=True))


class SqlAlchemyTeamMemberRepository(TeamMemberRepositoryPort):
    """Repository backed by SQLAlchemy for the team_members table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def list_by_owner(self, owner_id: str) -> list[TeamMember]:
        """Return the members managed by the owner, ordered by name."""
        engine = self._db_port.get_budget_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_OWNER_MEMBERS_SQL,
                {"owner_id": owner_id},
            ).all()
        return [
            TeamMember(
                id=str(row.id),
                name=row.name,
                owner_id=str(row.user_id) if row.user_id is not None else None,
                role=row.role,
                is_active=row.is_active is not False,
            )
            for row in rows
        ]

    def list_existing_ids(self, member_ids: Iterable[str]) -> set[str]:
        """Return the subset of the given ids present in team_members."""
        ids = sorted(set(member_ids))
        if not ids:
            return set()
        engine = self._db_port.get_budget_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_EXISTING_MEMBER_IDS_SQL,
                {"member_ids": ids},
            ).all()
        return {str(row.id) for row in rows}


__all__ = [
    "SqlAlchemyTeamMemberRepository",
    "SELECT_OWNER_MEMBERS_SQL",
    "SELECT_EXISTING_MEMBER_IDS_SQL",
]
