"""Domain policies package."""

from .team_assignment import AssignmentChange, plan_assignment_change

__all__ = ["AssignmentChange", "plan_assignment_change"]
