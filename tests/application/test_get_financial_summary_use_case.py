"""Tests for the GetFinancialSummaryUseCase."""

from decimal import Decimal

import pytest

from budget_tracker.application.use_cases.get_financial_summary import (
    GetFinancialSummaryUseCase,
)
from budget_tracker.domain.exceptions import InvalidInput, NotFound
from budget_tracker.infrastructure.summary_cache import InMemorySummaryCache


def test_execute_computes_on_demand_without_cache(
    project_repository,
    transaction_repository,
    logger,
) -> None:
    use_case = GetFinancialSummaryUseCase(
        project_repository,
        transaction_repository,
        logger=logger,
    )

    first = use_case.execute("p1")
    second = use_case.execute("p1")

    assert first == second
    assert first.received_amount == Decimal("1500")
    assert transaction_repository.calls == 2


def test_execute_tolerates_store_repeating_rows(
    project_repository,
    transaction_repository,
    logger,
) -> None:
    """Rows multiplied by a bad join are counted once."""
    transaction_repository.fan_out = 2
    use_case = GetFinancialSummaryUseCase(
        project_repository,
        transaction_repository,
        logger=logger,
    )

    summary = use_case.execute("p1")

    assert summary.received_amount == Decimal("1500")
    assert summary.remaining_amount == Decimal("1000")
    logger.warning.assert_called()


def test_execute_serves_cached_summary_until_invalidated(
    project_repository,
    transaction_repository,
    transaction_factory,
    logger,
) -> None:
    cache = InMemorySummaryCache(logger=logger)
    use_case = GetFinancialSummaryUseCase(
        project_repository,
        transaction_repository,
        cache=cache,
        logger=logger,
    )

    use_case.execute("p1")
    use_case.execute("p1")
    assert transaction_repository.calls == 1

    transaction_repository.transactions.append(transaction_factory("t4", "250"))
    cache.invalidate("p1")

    summary = use_case.execute("p1")

    assert transaction_repository.calls == 2
    assert summary.received_amount == Decimal("1750")


def test_execute_propagates_not_found(
    project_repository,
    transaction_repository,
    logger,
) -> None:
    use_case = GetFinancialSummaryUseCase(
        project_repository,
        transaction_repository,
        logger=logger,
    )

    with pytest.raises(NotFound):
        use_case.execute("missing")


def test_execute_logs_and_raises_contract_violation(
    project_repository,
    transaction_repository,
    transaction_factory,
    logger,
) -> None:
    """A transaction of another project signals a broken query."""
    transaction_repository.list_by_project = lambda project_id: [
        transaction_factory("t9", "10", project_id="other")
    ]
    use_case = GetFinancialSummaryUseCase(
        project_repository,
        transaction_repository,
        logger=logger,
    )

    with pytest.raises(InvalidInput):
        use_case.execute("p1")
    logger.error.assert_called_once()
