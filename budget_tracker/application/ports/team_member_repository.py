"""Port for the team member directory."""

from collections.abc import Iterable
from typing import Protocol

from budget_tracker.domain.models import TeamMember


class TeamMemberRepositoryPort(Protocol):
    """Port exposing team members managed by an owner."""

    def list_by_owner(self, owner_id: str) -> list[TeamMember]:
        """Return the members managed by the owner."""

    def list_existing_ids(self, member_ids: Iterable[str]) -> set[str]:
        """Return the subset of the given ids that exist."""


__all__ = ["TeamMemberRepositoryPort"]
