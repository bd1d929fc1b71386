"""Application ports package."""

from .database import DatabaseEnginePort
from .installment_repository import InstallmentRepositoryPort
from .project_repository import ProjectRepositoryPort
from .summary_cache import SummaryCachePort
from .team_assignment_repository import TeamAssignmentRepositoryPort
from .team_member_repository import TeamMemberRepositoryPort
from .transaction_repository import TransactionRepositoryPort

__all__ = [
    "DatabaseEnginePort",
    "InstallmentRepositoryPort",
    "ProjectRepositoryPort",
    "SummaryCachePort",
    "TeamAssignmentRepositoryPort",
    "TeamMemberRepositoryPort",
    "TransactionRepositoryPort",
]
