"""Domain models for projects and the rows that reference them."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class PaymentType(str, Enum):
    """How a project expects to be paid. Informational only."""

    FIXED = "fixed"
    INSTALLMENT = "installment"


@dataclass(frozen=True)
class Project:
    """Project with a total budget.

    Attributes:
        id: Unique project identifier.
        title: Display title.
        total_budget: Budget the project expects to receive.
        payment_type: Fixed or installment payment plan.
        created_by: Owning user identifier.
    """

    id: str
    title: str
    total_budget: Decimal
    payment_type: PaymentType = PaymentType.FIXED
    created_by: str | None = None


@dataclass(frozen=True)
class Transaction:
    """Money received against a project."""

    id: str
    project_id: str
    amount: Decimal
    installment_ref: str | None = None
    recorded_at: date | None = None


@dataclass(frozen=True)
class Installment:
    """Planned installment of a project's budget."""

    id: str
    project_id: str
    installment_number: int
    amount: Decimal
    due_date: date
    is_paid: bool = False


@dataclass(frozen=True)
class TeamMember:
    """Person who can be assigned to projects.

    Attributes:
        id: Unique member identifier.
        name: Display name.
        owner_id: User who manages the member.
        role: Free-text role, e.g. developer or designer.
        is_active: Whether the member is still working with the owner.
    """

    id: str
    name: str
    owner_id: str | None = None
    role: str | None = None
    is_active: bool = True


@dataclass(frozen=True)
class TeamAssignment:
    """Link between a project and a team member."""

    project_id: str
    team_member_id: str


__all__ = [
    "PaymentType",
    "Project",
    "Transaction",
    "Installment",
    "TeamMember",
    "TeamAssignment",
]
