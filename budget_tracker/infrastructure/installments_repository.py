"""SQLAlchemy-backed repository for payment installments."""

from sqlalchemy import text

from budget_tracker.application.ports.database import DatabaseEnginePort
from budget_tracker.application.ports.installment_repository import (
    InstallmentRepositoryPort,
)
from budget_tracker.domain.models import Installment
from budget_tracker.utils.decimal_utils import coerce_decimal


SELECT_PROJECT_INSTALLMENTS_SQL = text(
    """
    SELECT id, project_id, installment_number, amount, due_date, is_paid
    FROM payment_installments
    WHERE project_id = :project_id
    ORDER BY installment_number, id
    """
)


class SqlAlchemyInstallmentRepository(InstallmentRepositoryPort):
    """Repository backed by SQLAlchemy for the payment_installments table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def list_by_project(self, project_id: str) -> list[Installment]:
        """Return the installment plan of a project."""
        engine = self._db_port.get_budget_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_PROJECT_INSTALLMENTS_SQL,
                {"project_id": project_id},
            ).all()
        return [
            Installment(
                id=str(row.id),
                project_id=str(row.project_id),
                installment_number=int(row.installment_number),
                amount=coerce_decimal(row.amount),
                due_date=row.due_date,
                is_paid=bool(row.is_paid),
            )
            for row in rows
        ]


__all__ = [
    "SqlAlchemyInstallmentRepository",
    "SELECT_PROJECT_INSTALLMENTS_SQL",
]
