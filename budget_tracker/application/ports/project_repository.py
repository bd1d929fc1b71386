"""Port for reading projects."""

from typing import Protocol

from budget_tracker.domain.models import Project


class ProjectRepositoryPort(Protocol):
    """Port exposing read access to the project store."""

    def get_by_id(self, project_id: str) -> Project:
        """Return a project or raise NotFound."""

    def list_by_owner(self, owner_id: str) -> list[Project]:
        """Return every project created by the owner."""


__all__ = ["ProjectRepositoryPort"]
