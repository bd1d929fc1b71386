"""Port for reading project transactions."""

from typing import Protocol

from budget_tracker.domain.models import Transaction


class TransactionRepositoryPort(Protocol):
    """Port exposing read access to the transaction store.

    Implementations must read transactions scoped to one project without
    joining other one-to-many relations of that project.
    """

    def list_by_project(self, project_id: str) -> list[Transaction]:
        """Return every transaction recorded against the project."""


__all__ = ["TransactionRepositoryPort"]
