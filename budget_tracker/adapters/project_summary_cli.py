"""CLI adapter printing financial summaries.

With a project id the command prints the project overview; with ``--owner``
it prints the portfolio totals of that owner instead, and ``--team`` adds one
line of statistics per team member of that owner.
"""

import argparse

from budget_tracker.application.use_cases.get_portfolio_totals import (
    GetPortfolioTotalsUseCase,
)
from budget_tracker.application.use_cases.get_project_overview import (
    GetProjectOverviewUseCase,
)
from budget_tracker.application.use_cases.get_team_member_stats import (
    GetTeamMemberStatsUseCase,
)
from budget_tracker.domain.exceptions import NotFound
from budget_tracker.infrastructure.container import (
    build_database_adapter,
    build_financial_summary_use_case,
    build_installment_repository,
    build_project_repository,
    build_team_assignment_repository,
    build_team_member_repository,
)
from budget_tracker.infrastructure.logging.logger import get_app_logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="budget-summary",
        description="Print the financial summary of a project or an owner.",
    )
    parser.add_argument("project_id", nargs="?", help="Project identifier.")
    parser.add_argument("--owner", help="Owner identifier for totals.")
    parser.add_argument(
        "--team",
        action="store_true",
        help="With --owner, also print per-member statistics.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run the summary report."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if not args.project_id and not args.owner:
        parser.error("a project id or --owner is required")
    if args.team and not args.owner:
        parser.error("--team requires --owner")

    logger = get_app_logger()
    db_adapter = build_database_adapter()
    projects = build_project_repository(db_adapter)
    summaries = build_financial_summary_use_case(db_adapter)

    if args.owner:
        totals = GetPortfolioTotalsUseCase(
            project_repository=projects,
            summary_use_case=summaries,
            logger=logger,
        ).execute(args.owner)
        print(
            f"Owner {totals.owner_id}: projects={totals.projects_count}, "
            f"completed={totals.completed_projects_count}, "
            f"budget={totals.total_budget_sum}, "
            f"received={totals.total_received_sum}, "
            f"remaining={totals.total_remaining_sum}"
        )
        if args.team:
            stats = GetTeamMemberStatsUseCase(
                member_repository=build_team_member_repository(db_adapter),
                team_repository=build_team_assignment_repository(db_adapter),
                summary_use_case=summaries,
                logger=logger,
            ).execute(args.owner)
            for row in stats:
                print(
                    f"  {row.name}: projects={row.total_projects}, "
                    f"completed={row.completed_projects}, "
                    f"completed_budget={row.total_completed_budget}, "
                    f"active_budget={row.total_active_budget}"
                )
        return

    use_case = GetProjectOverviewUseCase(
        project_repository=projects,
        installment_repository=build_installment_repository(db_adapter),
        summary_use_case=summaries,
    )
    try:
        overview = use_case.execute(args.project_id)
    except NotFound as exc:
        logger.error(str(exc))
        return

    summary = overview.summary
    print(f"{overview.title} ({overview.payment_type})")
    print(
        f"budget={summary.total_budget}, received={summary.received_amount}, "
        f"remaining={summary.remaining_amount}, "
        f"progress={summary.display_percentage}%, "
        f"completed={summary.is_completed}"
    )
    print(
        f"transactions={summary.transactions_count}, "
        f"installments={overview.total_installments}, "
        f"paid={overview.paid_installments}, "
        f"overdue={overview.overdue_installments}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
