"""SQLAlchemy-backed repository for project transactions.

Transactions are read from their own table only. Joining installments or team
assignments here would repeat each transaction once per joined row.
"""

from sqlalchemy import text

from budget_tracker.application.ports.database import DatabaseEnginePort
from budget_tracker.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from budget_tracker.domain.models import Transaction
from budget_tracker.utils.decimal_utils import coerce_decimal


SELECT_PROJECT_TRANSACTIONS_SQL = text(
    """
    SELECT id, project_id, amount, installment_id, transaction_date
    FROM transactions
    WHERE project_id = :project_id
    ORDER BY transaction_date, id
    """
)


class SqlAlchemyTransactionRepository(TransactionRepositoryPort):
    """Repository backed by SQLAlchemy for the transactions table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the budget engine.
        """
        self._db_port = db_port

    def list_by_project(self, project_id: str) -> list[Transaction]:
        """Return every transaction recorded against the project."""
        engine = self._db_port.get_budget_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_PROJECT_TRANSACTIONS_SQL,
                {"project_id": project_id},
            ).all()
        return [
            Transaction(
                id=str(row.id),
                project_id=str(row.project_id),
                amount=coerce_decimal(row.amount),
                installment_ref=(
                    str(row.installment_id)
                    if row.installment_id is not None
                    else None
                ),
                recorded_at=row.transaction_date,
            )
            for row in rows
        ]


__all__ = [
    "SqlAlchemyTransactionRepository",
    "SELECT_PROJECT_TRANSACTIONS_SQL",
]
