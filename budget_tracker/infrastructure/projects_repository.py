"""SQLAlchemy-backed repository for projects."""

from sqlalchemy import text

from budget_tracker.application.ports.database import DatabaseEnginePort
from budget_tracker.application.ports.project_repository import (
    ProjectRepositoryPort,
)
from budget_tracker.domain.exceptions import NotFound
from budget_tracker.domain.models import Project
from budget_tracker.domain.services.normalization import normalize_payment_type
from budget_tracker.utils.decimal_utils import coerce_decimal


SELECT_PROJECT_SQL = text(
    """
    SELECT id, title, total_budget, payment_type, user_id
    FROM projects
    WHERE id = :project_id
    """
)

SELECT_OWNER_PROJECTS_SQL = text(
    """
    SELECT id, title, total_budget, payment_type, user_id
    FROM projects
    WHERE user_id = :owner_id
    ORDER BY created_at DESC, id
    """
)


class SqlAlchemyProjectRepository(ProjectRepositoryPort):
    """Repository backed by SQLAlchemy for the projects table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the budget engine.
        """
        self._db_port = db_port

    def get_by_id(self, project_id: str) -> Project:
        """Return a project by id.

        Raises:
            NotFound: If no project has this id.
        """
        engine = self._db_port.get_budget_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_PROJECT_SQL,
                {"project_id": project_id},
            ).first()
        if row is None:
            raise NotFound("Project", project_id)
        return self._to_project(row)

    def list_by_owner(self, owner_id: str) -> list[Project]:
        """Return the projects created by an owner, newest first."""
        engine = self._db_port.get_budget_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_OWNER_PROJECTS_SQL,
                {"owner_id": owner_id},
            ).all()
        return [self._to_project(row) for row in rows]

    @staticmethod
    def _to_project(row) -> Project:
        return Project(
            id=str(row.id),
            title=row.title,
            total_budget=coerce_decimal(row.total_budget),
            payment_type=normalize_payment_type(row.payment_type),
            created_by=str(row.user_id) if row.user_id is not None else None,
        )


__all__ = [
    "SqlAlchemyProjectRepository",
    "SELECT_PROJECT_SQL",
    "SELECT_OWNER_PROJECTS_SQL",
]
