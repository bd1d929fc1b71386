"""Domain validation helpers."""

from collections.abc import Iterable

from budget_tracker.domain.constants import ZERO
from budget_tracker.domain.exceptions import InvalidInput
from budget_tracker.domain.models import Project, Transaction


def validate_project(project: Project) -> None:
    """Check the budget invariant of a project.

    Args:
        project: Project to validate.

    Raises:
        InvalidInput: If the total budget is negative.
    """
    if project.total_budget < ZERO:
        raise InvalidInput(
            f"Project {project.id} has a negative budget: {project.total_budget}"
        )


def validate_transactions_scope(
    project: Project,
    transactions: Iterable[Transaction],
) -> None:
    """Check that every transaction belongs to the project.

    A mismatch means the caller assembled the set with the wrong query.

    Args:
        project: Project the transactions should reference.
        transactions: Transactions supplied by the caller.

    Raises:
        InvalidInput: If a transaction references another project.
    """
    for transaction in transactions:
        if transaction.project_id != project.id:
            raise InvalidInput(
                f"Transaction {transaction.id} belongs to project "
                f"{transaction.project_id}, not {project.id}"
            )


__all__ = ["validate_project", "validate_transactions_scope"]
