"""Shared in-memory stores for use case tests."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
import threading
from unittest.mock import MagicMock

import pytest

from budget_tracker.domain.exceptions import NotFound
from budget_tracker.domain.models import (
    Installment,
    PaymentType,
    Project,
    TeamMember,
    Transaction,
)
from budget_tracker.domain.policies import (
    AssignmentChange,
    plan_assignment_change,
)


class InMemoryProjectRepository:
    """Project store keeping rows in a dict."""

    def __init__(self, projects: list[Project] | None = None) -> None:
        self.projects = {project.id: project for project in projects or []}

    def get_by_id(self, project_id: str) -> Project:
        try:
            return self.projects[project_id]
        except KeyError:
            raise NotFound("Project", project_id) from None

    def list_by_owner(self, owner_id: str) -> list[Project]:
        return [
            project
            for project in self.projects.values()
            if project.created_by == owner_id
        ]


class InMemoryTransactionRepository:
    """Transaction store that can repeat rows like a fan-out join."""

    def __init__(self, transactions: list[Transaction] | None = None) -> None:
        self.transactions = list(transactions or [])
        self.fan_out = 1
        self.calls = 0

    def list_by_project(self, project_id: str) -> list[Transaction]:
        self.calls += 1
        rows = [t for t in self.transactions if t.project_id == project_id]
        return rows * self.fan_out


class InMemoryInstallmentRepository:
    def __init__(self, installments: list[Installment] | None = None) -> None:
        self.installments = list(installments or [])

    def list_by_project(self, project_id: str) -> list[Installment]:
        return [i for i in self.installments if i.project_id == project_id]


class InMemoryTeamAssignmentRepository:
    """Link store whose replacement is atomic per repository."""

    def __init__(self, links: dict[str, set[str]] | None = None) -> None:
        self.links = {key: set(value) for key, value in (links or {}).items()}
        self.applied: list[AssignmentChange] = []
        self._lock = threading.Lock()

    def list_member_ids(self, project_id: str) -> set[str]:
        return set(self.links.get(project_id, set()))

    def list_project_ids(self, team_member_id: str) -> set[str]:
        return {
            project_id
            for project_id, members in self.links.items()
            if team_member_id in members
        }

    def replace_members(
        self,
        project_id: str,
        member_ids: Iterable[str],
    ) -> AssignmentChange:
        with self._lock:
            members = self.links.setdefault(project_id, set())
            change = plan_assignment_change(project_id, members, member_ids)
            if not change.is_noop:
                self.applied.append(change)
                members -= change.to_remove
                members |= change.to_add
            return change


class InMemoryTeamMemberRepository:
    def __init__(self, members: list[TeamMember] | None = None) -> None:
        self.members = {member.id: member for member in members or []}

    def list_by_owner(self, owner_id: str) -> list[TeamMember]:
        return [m for m in self.members.values() if m.owner_id == owner_id]

    def list_existing_ids(self, member_ids: Iterable[str]) -> set[str]:
        return {member_id for member_id in member_ids if member_id in self.members}


def make_project(
    project_id: str = "p1",
    budget: str = "2500",
    owner: str | None = "owner-1",
    payment_type: PaymentType = PaymentType.INSTALLMENT,
) -> Project:
    return Project(
        id=project_id,
        title=f"Project {project_id}",
        total_budget=Decimal(budget),
        payment_type=payment_type,
        created_by=owner,
    )


def make_transaction(
    transaction_id: str,
    amount: str,
    project_id: str = "p1",
    installment_ref: str | None = None,
    recorded_at: date | None = None,
) -> Transaction:
    return Transaction(
        id=transaction_id,
        project_id=project_id,
        amount=Decimal(amount),
        installment_ref=installment_ref,
        recorded_at=recorded_at,
    )


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def project_repository() -> InMemoryProjectRepository:
    return InMemoryProjectRepository([make_project()])


@pytest.fixture
def transaction_repository() -> InMemoryTransactionRepository:
    return InMemoryTransactionRepository(
        [
            make_transaction("t1", "500", installment_ref="i1",
                             recorded_at=date(2024, 1, 10)),
            make_transaction("t2", "500", installment_ref="i1",
                             recorded_at=date(2024, 2, 10)),
            make_transaction("t3", "500", installment_ref="i2",
                             recorded_at=date(2024, 3, 10)),
        ]
    )


@pytest.fixture
def installment_repository() -> InMemoryInstallmentRepository:
    return InMemoryInstallmentRepository(
        [
            Installment(
                id="i1",
                project_id="p1",
                installment_number=1,
                amount=Decimal("1000"),
                due_date=date(2024, 2, 1),
                is_paid=True,
            ),
            Installment(
                id="i2",
                project_id="p1",
                installment_number=2,
                amount=Decimal("1500"),
                due_date=date(2024, 4, 1),
                is_paid=False,
            ),
        ]
    )


@pytest.fixture
def team_repository() -> InMemoryTeamAssignmentRepository:
    return InMemoryTeamAssignmentRepository()


@pytest.fixture
def member_repository() -> InMemoryTeamMemberRepository:
    return InMemoryTeamMemberRepository(
        [
            TeamMember(id="m1", name="Ana", owner_id="owner-1"),
            TeamMember(id="m2", name="Beka", owner_id="owner-1"),
            TeamMember(id="m3", name="Dato", owner_id="owner-1"),
        ]
    )


@pytest.fixture
def project_factory():
    return make_project


@pytest.fixture
def transaction_factory():
    return make_transaction
