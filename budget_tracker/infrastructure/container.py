"""Composition root for wiring infrastructure adapters.

The summary cache is a process-wide singleton: every summary use case and
every invalidator built here shares it, so a write hook always reaches the
entries that readers are served from.
"""

import threading

from budget_tracker.application.ports.database import DatabaseEnginePort
from budget_tracker.application.ports.installment_repository import (
    InstallmentRepositoryPort,
)
from budget_tracker.application.ports.project_repository import (
    ProjectRepositoryPort,
)
from budget_tracker.application.ports.summary_cache import SummaryCachePort
from budget_tracker.application.ports.team_assignment_repository import (
    TeamAssignmentRepositoryPort,
)
from budget_tracker.application.ports.team_member_repository import (
    TeamMemberRepositoryPort,
)
from budget_tracker.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from budget_tracker.application.use_cases.get_financial_summary import (
    GetFinancialSummaryUseCase,
)
from budget_tracker.application.use_cases.invalidate_financial_summary import (
    FinancialSummaryInvalidator,
)
from budget_tracker.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from budget_tracker.infrastructure.installments_repository import (
    SqlAlchemyInstallmentRepository,
)
from budget_tracker.infrastructure.logging.logger import get_app_logger
from budget_tracker.infrastructure.projects_repository import (
    SqlAlchemyProjectRepository,
)
from budget_tracker.infrastructure.settings import BudgetSettings
from budget_tracker.infrastructure.summary_cache import (
    InMemorySummaryCache,
    NoOpSummaryCache,
)
from budget_tracker.infrastructure.team_assignments_repository import (
    SqlAlchemyTeamAssignmentRepository,
)
from budget_tracker.infrastructure.team_members_repository import (
    SqlAlchemyTeamMemberRepository,
)
from budget_tracker.infrastructure.transactions_repository import (
    SqlAlchemyTransactionRepository,
)


_summary_cache: SummaryCachePort | None = None
_summary_cache_lock = threading.Lock()


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_project_repository(
    db_port: DatabaseEnginePort | None = None,
) -> ProjectRepositoryPort:
    """Return the projects repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyProjectRepository(resolved_db)


def build_transaction_repository(
    db_port: DatabaseEnginePort | None = None,
) -> TransactionRepositoryPort:
    """Return the transactions repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTransactionRepository(resolved_db)


def build_installment_repository(
    db_port: DatabaseEnginePort | None = None,
) -> InstallmentRepositoryPort:
    """Return the installments repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyInstallmentRepository(resolved_db)


def build_team_assignment_repository(
    db_port: DatabaseEnginePort | None = None,
) -> TeamAssignmentRepositoryPort:
    """Return the team assignments repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTeamAssignmentRepository(resolved_db)


def build_team_member_repository(
    db_port: DatabaseEnginePort | None = None,
) -> TeamMemberRepositoryPort:
    """Return the team members repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTeamMemberRepository(resolved_db)


def build_summary_cache(
    settings: BudgetSettings | None = None,
) -> SummaryCachePort:
    """Return the summary cache selected by SUMMARY_READ_MODE."""
    resolved_settings = settings or BudgetSettings.from_env()
    if resolved_settings.uses_cache:
        return InMemorySummaryCache(logger=get_app_logger())
    return NoOpSummaryCache()


def get_summary_cache() -> SummaryCachePort:
    """Return the shared summary cache, creating it on first use."""
    global _summary_cache
    with _summary_cache_lock:
        if _summary_cache is None:
            _summary_cache = build_summary_cache()
        return _summary_cache


def build_financial_summary_use_case(
    db_port: DatabaseEnginePort | None = None,
    cache: SummaryCachePort | None = None,
) -> GetFinancialSummaryUseCase:
    """Return the summary use case wired to the SQL repositories.

    Without an explicit cache the use case reads through the shared cache.
    """
    resolved_db = db_port or build_database_adapter()
    return GetFinancialSummaryUseCase(
        project_repository=build_project_repository(resolved_db),
        transaction_repository=build_transaction_repository(resolved_db),
        cache=cache or get_summary_cache(),
        logger=get_app_logger(),
    )


def build_summary_invalidator(
    cache: SummaryCachePort | None = None,
) -> FinancialSummaryInvalidator:
    """Return the invalidation hooks bound to the shared summary cache."""
    return FinancialSummaryInvalidator(
        cache or get_summary_cache(),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_project_repository",
    "build_transaction_repository",
    "build_installment_repository",
    "build_team_assignment_repository",
    "build_team_member_repository",
    "build_summary_cache",
    "get_summary_cache",
    "build_financial_summary_use_case",
    "build_summary_invalidator",
]
