"""Domain exceptions for the budget tracker core."""


class BudgetTrackerError(Exception):
    """Base class for errors raised by the core."""


class InvalidInput(BudgetTrackerError, ValueError):
    """Raised when aggregation preconditions are violated.

    This signals a caller defect such as a negative budget or a transaction
    scoped to a different project, not a user-facing business error.
    """


class NotFound(BudgetTrackerError, LookupError):
    """Raised when a referenced project does not exist in the store."""

    def __init__(self, entity: str, identifier: str) -> None:
        super().__init__(f"{entity} not found: {identifier}")
        self.entity = entity
        self.identifier = identifier


__all__ = ["BudgetTrackerError", "InvalidInput", "NotFound"]
