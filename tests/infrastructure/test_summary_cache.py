"""Tests for the financial summary projection caches."""

from decimal import Decimal
import threading
from unittest.mock import MagicMock

from budget_tracker.domain.models import FinancialSummary
from budget_tracker.infrastructure.summary_cache import (
    InMemorySummaryCache,
    NoOpSummaryCache,
)


def _summary(project_id: str, received: str) -> FinancialSummary:
    amount = Decimal(received)
    return FinancialSummary(
        project_id=project_id,
        total_budget=Decimal("1000"),
        received_amount=amount,
        remaining_amount=Decimal("1000") - amount,
        completion_percentage=amount / Decimal("10"),
        is_completed=amount >= Decimal("1000"),
    )


def test_get_or_compute_stores_value_until_invalidated() -> None:
    cache = InMemorySummaryCache(logger=MagicMock())
    compute = MagicMock(side_effect=[_summary("p1", "100"), _summary("p1", "200")])

    first = cache.get_or_compute("p1", compute)
    second = cache.get_or_compute("p1", compute)
    assert first is second
    assert cache.is_fresh("p1") is True

    cache.invalidate("p1")
    assert cache.is_fresh("p1") is False

    third = cache.get_or_compute("p1", compute)
    assert third.received_amount == Decimal("200")
    assert compute.call_count == 2


def test_invalidation_during_compute_discards_stale_value() -> None:
    """A value computed under a superseded token is returned but not kept."""
    cache = InMemorySummaryCache(logger=MagicMock())
    state = {"received": "100"}

    def _compute_with_concurrent_write() -> FinancialSummary:
        summary = _summary("p1", state["received"])
        state["received"] = "300"
        cache.invalidate("p1")
        return summary

    stale = cache.get_or_compute("p1", _compute_with_concurrent_write)
    fresh = cache.get_or_compute("p1", lambda: _summary("p1", state["received"]))

    assert stale.received_amount == Decimal("100")
    assert fresh.received_amount == Decimal("300")


def test_invalidate_waits_for_in_flight_compute() -> None:
    """Once invalidate returns, readers see the post-write state."""
    cache = InMemorySummaryCache(logger=MagicMock())
    store = {"received": "100"}
    compute_started = threading.Event()
    release_compute = threading.Event()

    def _slow_compute() -> FinancialSummary:
        snapshot = store["received"]
        compute_started.set()
        release_compute.wait(timeout=5)
        return _summary("p1", snapshot)

    reader = threading.Thread(
        target=cache.get_or_compute,
        args=("p1", _slow_compute),
    )
    reader.start()
    assert compute_started.wait(timeout=5)

    def _write() -> None:
        store["received"] = "400"
        cache.invalidate("p1")

    writer = threading.Thread(target=_write)
    writer.start()
    release_compute.set()
    reader.join(timeout=5)
    writer.join(timeout=5)

    after_write = cache.get_or_compute(
        "p1",
        lambda: _summary("p1", store["received"]),
    )
    assert after_write.received_amount == Decimal("400")


def test_keys_are_independent() -> None:
    cache = InMemorySummaryCache(logger=MagicMock())
    cache.get_or_compute("p1", lambda: _summary("p1", "1"))
    cache.get_or_compute("p2", lambda: _summary("p2", "2"))

    cache.invalidate("p1")

    assert cache.is_fresh("p1") is False
    assert cache.is_fresh("p2") is True


def test_clear_invalidates_every_key() -> None:
    cache = InMemorySummaryCache(logger=MagicMock())
    cache.get_or_compute("p1", lambda: _summary("p1", "1"))
    cache.get_or_compute("p2", lambda: _summary("p2", "2"))

    cache.clear()

    assert cache.is_fresh("p1") is False
    assert cache.is_fresh("p2") is False


def test_noop_cache_always_recomputes() -> None:
    cache = NoOpSummaryCache()
    compute = MagicMock(return_value=_summary("p1", "5"))

    cache.get_or_compute("p1", compute)
    cache.get_or_compute("p1", compute)
    cache.invalidate("p1")

    assert compute.call_count == 2


def test_compute_in_flight_does_not_block_other_keys() -> None:
    """A slow p1 compute leaves p2 reads and invalidations unblocked."""
    cache = InMemorySummaryCache(logger=MagicMock())
    compute_started = threading.Event()
    release_compute = threading.Event()

    def _slow_compute() -> FinancialSummary:
        compute_started.set()
        release_compute.wait(timeout=5)
        return _summary("p1", "100")

    reader = threading.Thread(
        target=cache.get_or_compute,
        args=("p1", _slow_compute),
    )
    reader.start()
    assert compute_started.wait(timeout=5)

    other_key_done = threading.Event()

    def _use_other_key() -> None:
        cache.get_or_compute("p2", lambda: _summary("p2", "7"))
        cache.invalidate("p2")
        cache.get_or_compute("p2", lambda: _summary("p2", "8"))
        other_key_done.set()

    other = threading.Thread(target=_use_other_key)
    other.start()
    try:
        assert other_key_done.wait(timeout=5)
        assert reader.is_alive()
        assert cache.is_fresh("p2") is True
    finally:
        release_compute.set()
        reader.join(timeout=5)
        other.join(timeout=5)

    assert cache.is_fresh("p1") is True


def test_clear_drops_bookkeeping_and_in_flight_values() -> None:
    cache = InMemorySummaryCache(logger=MagicMock())
    cache.get_or_compute("p2", lambda: _summary("p2", "2"))
    cache.invalidate("p2")

    def _compute_then_clear() -> FinancialSummary:
        cache.clear()
        return _summary("p1", "1")

    stale = cache.get_or_compute("p1", _compute_then_clear)

    assert stale.received_amount == Decimal("1")
    assert cache.is_fresh("p1") is False
    assert cache._tokens == {}
    assert cache._entries == {}
