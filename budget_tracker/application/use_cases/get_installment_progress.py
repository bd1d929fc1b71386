"""Use case to report payment progress per installment."""

from datetime import date

from budget_tracker.application.ports.installment_repository import (
    InstallmentRepositoryPort,
)
from budget_tracker.application.ports.project_repository import (
    ProjectRepositoryPort,
)
from budget_tracker.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from budget_tracker.domain.models import InstallmentProgress
from budget_tracker.domain.services.finance import compute_installment_progress
from budget_tracker.domain.services.validation import (
    validate_transactions_scope,
)
from budget_tracker.infrastructure.logging.logger import get_app_logger


class GetInstallmentProgressUseCase:
    """Compute paid and remaining amounts of each installment."""

    def __init__(
        self,
        project_repository: ProjectRepositoryPort,
        installment_repository: InstallmentRepositoryPort,
        transaction_repository: TransactionRepositoryPort,
        logger=None,
    ) -> None:
        self._projects = project_repository
        self._installments = installment_repository
        self._transactions = transaction_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        project_id: str,
        today: date | None = None,
    ) -> list[InstallmentProgress]:
        """Return installment progress ordered by installment number.

        Args:
            project_id: Identifier of the project.
            today: Reference date for overdue detection; defaults to today.

        Returns:
            list[InstallmentProgress]: One entry per installment.
        """
        project = self._projects.get_by_id(project_id)
        transactions = self._transactions.list_by_project(project_id)
        validate_transactions_scope(project, transactions)
        return compute_installment_progress(
            self._installments.list_by_project(project_id),
            transactions,
            today=today or date.today(),
            logger=self._logger,
        )


__all__ = ["GetInstallmentProgressUseCase"]
