"""Set-replace policy for project team assignments."""

from collections.abc import Iterable
from dataclasses import dataclass

from budget_tracker.domain.services.normalization import normalize_member_ids


@dataclass(frozen=True)
class AssignmentChange:
    """Difference between the current and the requested member sets."""

    project_id: str
    desired: frozenset[str]
    to_remove: frozenset[str]
    to_add: frozenset[str]

    @property
    def is_noop(self) -> bool:
        return not self.to_remove and not self.to_add


def plan_assignment_change(
    project_id: str,
    current_member_ids: Iterable[str],
    requested_member_ids: Iterable[str],
) -> AssignmentChange:
    """Plan the replacement of a project's team with the requested members.

    The requested set replaces the current one; members absent from it are
    removed.
    """
    current = normalize_member_ids(current_member_ids)
    desired = normalize_member_ids(requested_member_ids)
    return AssignmentChange(
        project_id=project_id,
        desired=desired,
        to_remove=current - desired,
        to_add=desired - current,
    )


__all__ = ["AssignmentChange", "plan_assignment_change"]
