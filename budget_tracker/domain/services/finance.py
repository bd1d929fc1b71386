"""Domain services for project financial aggregates.

Every aggregate here is computed from one relation at a time and combined as
scalars. Transactions are de-duplicated by id before any sum, so a caller that
hands over rows multiplied by a join (installments, team assignments) cannot
inflate the totals.
"""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from logging import Logger

from budget_tracker.domain.constants import HUNDRED, ZERO
from budget_tracker.domain.models import (
    FinancialSummary,
    Installment,
    InstallmentProgress,
    PaymentTimelinePoint,
    PortfolioTotals,
    Project,
    ProjectOverview,
    TeamMember,
    TeamMemberStats,
    Transaction,
)
from budget_tracker.domain.services.validation import (
    validate_project,
    validate_transactions_scope,
)
from budget_tracker.utils.decimal_utils import coerce_decimal


def deduplicate_transactions(
    transactions: Iterable[Transaction],
    logger: Logger | None = None,
) -> list[Transaction]:
    """Keep the first occurrence of every transaction id.

    Args:
        transactions: Transactions, possibly repeated by an upstream join.
        logger: Optional logger used to report dropped rows.

    Returns:
        list[Transaction]: Transactions unique by id, in input order.
    """
    unique: dict[str, Transaction] = {}
    dropped = 0
    for transaction in transactions:
        kept = unique.get(transaction.id)
        if kept is None:
            unique[transaction.id] = transaction
            continue
        dropped += 1
        if logger is not None and kept.amount != transaction.amount:
            logger.warning(
                f"Transaction {transaction.id} repeated with a different "
                f"amount ({transaction.amount} vs {kept.amount}); "
                "keeping the first row"
            )
    if dropped and logger is not None:
        logger.warning(f"Dropped {dropped} duplicated transaction rows")
    return list(unique.values())


def completion_percentage(
    received_amount: Decimal,
    total_budget: Decimal,
) -> Decimal:
    """Return the received share of the budget as an unclamped percentage."""
    if total_budget <= ZERO:
        return ZERO
    return received_amount / total_budget * HUNDRED


def summarize(
    project: Project,
    transactions: Iterable[Transaction],
    logger: Logger | None = None,
) -> FinancialSummary:
    """Compute the financial summary of a project.

    Args:
        project: Project to summarize.
        transactions: Transactions of the project. Duplicates by id are
            tolerated and counted once.
        logger: Optional logger used for duplicate warnings.

    Returns:
        FinancialSummary: Received, remaining and completion figures.

    Raises:
        InvalidInput: If the budget is negative or a transaction belongs to
            another project.
    """
    rows = list(transactions)
    validate_project(project)
    validate_transactions_scope(project, rows)

    unique = deduplicate_transactions(rows, logger)
    total_budget = coerce_decimal(project.total_budget)
    received_amount = sum(
        (coerce_decimal(transaction.amount) for transaction in unique),
        ZERO,
    )
    dates = [t.recorded_at for t in unique if t.recorded_at is not None]

    return FinancialSummary(
        project_id=project.id,
        total_budget=total_budget,
        received_amount=received_amount,
        remaining_amount=total_budget - received_amount,
        completion_percentage=completion_percentage(
            received_amount,
            total_budget,
        ),
        is_completed=received_amount >= total_budget,
        transactions_count=len(unique),
        last_transaction_date=max(dates) if dates else None,
    )


def compute_installment_progress(
    installments: Iterable[Installment],
    transactions: Iterable[Transaction],
    *,
    today: date,
    logger: Logger | None = None,
) -> list[InstallmentProgress]:
    """Compute how much of each installment has been paid.

    Full payment and overdue status come from the received amounts, not from
    the stored ``is_paid`` flag.

    Args:
        installments: Installment plan rows of a project.
        transactions: Transactions of the same project.
        today: Reference date for overdue detection.
        logger: Optional logger used for duplicate warnings.

    Returns:
        list[InstallmentProgress]: Progress ordered by installment number.
    """
    paid: dict[str, Decimal] = {}
    for transaction in deduplicate_transactions(transactions, logger):
        if transaction.installment_ref is None:
            continue
        paid[transaction.installment_ref] = paid.get(
            transaction.installment_ref, ZERO
        ) + coerce_decimal(transaction.amount)

    progress = []
    for installment in sorted(
        installments,
        key=lambda row: (row.installment_number, row.id),
    ):
        amount = coerce_decimal(installment.amount)
        paid_amount = paid.get(installment.id, ZERO)
        is_fully_paid = paid_amount >= amount
        progress.append(
            InstallmentProgress(
                installment_id=installment.id,
                installment_number=installment.installment_number,
                amount=amount,
                due_date=installment.due_date,
                is_paid=installment.is_paid,
                paid_amount=paid_amount,
                remaining_amount=amount - paid_amount,
                is_fully_paid=is_fully_paid,
                is_overdue=installment.due_date < today and not is_fully_paid,
                days_until_due=(installment.due_date - today).days,
            )
        )
    return progress


def build_project_overview(
    project: Project,
    summary: FinancialSummary,
    installments: Iterable[Installment],
    *,
    today: date,
) -> ProjectOverview:
    """Combine a summary with installment counts.

    Installments are counted on their own and never joined to the
    transactions behind ``summary``.
    """
    unique = {installment.id: installment for installment in installments}
    rows = list(unique.values())
    return ProjectOverview(
        summary=summary,
        title=project.title,
        payment_type=project.payment_type.value,
        total_installments=len(rows),
        paid_installments=sum(1 for row in rows if row.is_paid),
        overdue_installments=sum(
            1 for row in rows if row.due_date < today and not row.is_paid
        ),
    )


def compute_portfolio_totals(
    owner_id: str,
    summaries: Iterable[FinancialSummary],
) -> PortfolioTotals:
    """Sum per-project summaries into owner-level totals."""
    rows = list(summaries)
    return PortfolioTotals(
        owner_id=owner_id,
        projects_count=len(rows),
        completed_projects_count=sum(1 for row in rows if row.is_completed),
        total_budget_sum=sum((row.total_budget for row in rows), ZERO),
        total_received_sum=sum((row.received_amount for row in rows), ZERO),
    )


def compute_team_member_stats(
    member: TeamMember,
    summaries: Iterable[FinancialSummary],
) -> TeamMemberStats:
    """Aggregate the summaries of the projects a member is assigned to.

    Args:
        member: Team member to report on.
        summaries: Summaries of the member's projects. A project repeated
            by an upstream join is counted once.

    Returns:
        TeamMemberStats: Project counts and budget sums split by completion.
    """
    unique = {summary.project_id: summary for summary in summaries}
    completed = [row for row in unique.values() if row.is_completed]
    active = [row for row in unique.values() if not row.is_completed]
    return TeamMemberStats(
        team_member_id=member.id,
        name=member.name,
        total_projects=len(unique),
        completed_projects=len(completed),
        active_projects=len(active),
        total_completed_budget=sum(
            (row.total_budget for row in completed),
            ZERO,
        ),
        total_active_budget=sum((row.total_budget for row in active), ZERO),
    )


def build_payment_timeline(
    transactions: Iterable[Transaction],
    logger: Logger | None = None,
) -> list[PaymentTimelinePoint]:
    """Return payments in date order with running totals.

    Undated transactions sort first.
    """
    unique = deduplicate_transactions(transactions, logger)
    ordered = sorted(
        unique,
        key=lambda row: (
            row.recorded_at is not None,
            row.recorded_at or date.min,
            row.id,
        ),
    )
    cumulative = ZERO
    timeline = []
    for transaction in ordered:
        amount = coerce_decimal(transaction.amount)
        cumulative += amount
        timeline.append(
            PaymentTimelinePoint(
                transaction_id=transaction.id,
                recorded_at=transaction.recorded_at,
                amount=amount,
                cumulative_amount=cumulative,
            )
        )
    return timeline


__all__ = [
    "deduplicate_transactions",
    "completion_percentage",
    "summarize",
    "compute_installment_progress",
    "build_project_overview",
    "compute_portfolio_totals",
    "compute_team_member_stats",
    "build_payment_timeline",
]
