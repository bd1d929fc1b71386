"""Port for reading installment plans."""

from typing import Protocol

from budget_tracker.domain.models import Installment


class InstallmentRepositoryPort(Protocol):
    """Port exposing read access to payment installments."""

    def list_by_project(self, project_id: str) -> list[Installment]:
        """Return the installment plan of a project."""


__all__ = ["InstallmentRepositoryPort"]
