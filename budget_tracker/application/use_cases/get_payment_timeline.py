"""Use case to build the cumulative payment timeline of a project."""

from budget_tracker.application.ports.project_repository import (
    ProjectRepositoryPort,
)
from budget_tracker.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from budget_tracker.domain.models import PaymentTimelinePoint
from budget_tracker.domain.services.finance import build_payment_timeline
from budget_tracker.domain.services.validation import (
    validate_transactions_scope,
)
from budget_tracker.infrastructure.logging.logger import get_app_logger


class GetPaymentTimelineUseCase:
    """Return payments of a project with running totals."""

    def __init__(
        self,
        project_repository: ProjectRepositoryPort,
        transaction_repository: TransactionRepositoryPort,
        logger=None,
    ) -> None:
        self._projects = project_repository
        self._transactions = transaction_repository
        self._logger = logger or get_app_logger()

    def execute(self, project_id: str) -> list[PaymentTimelinePoint]:
        project = self._projects.get_by_id(project_id)
        transactions = self._transactions.list_by_project(project_id)
        validate_transactions_scope(project, transactions)
        return build_payment_timeline(transactions, self._logger)


__all__ = ["GetPaymentTimelineUseCase"]
