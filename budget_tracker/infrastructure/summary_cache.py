"""Projection caches for financial summaries.

``InMemorySummaryCache`` keeps one summary per project id. Computation and
invalidation of a key run under the same per-key lock, and every entry is
tagged with the key's invalidation token at the time it was computed, so a
summary computed before an invalidation can never be published after it.
Different keys never share a lock.

Locks and tokens are kept for every project id seen since the last
``clear()``, which drops all of them and starts a new generation.
"""

from dataclasses import dataclass
import threading
from typing import Callable

from budget_tracker.application.ports.summary_cache import SummaryCachePort
from budget_tracker.domain.models import FinancialSummary
from budget_tracker.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class _CacheEntry:
    summary: FinancialSummary
    token: int


class InMemorySummaryCache(SummaryCachePort):
    """Thread-safe keyed cache with per-key invalidation tokens."""

    def __init__(self, logger=None) -> None:
        """Initialize an empty cache.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._entries: dict[str, _CacheEntry] = {}
        self._tokens: dict[str, int] = {}
        self._locks: dict[str, threading.RLock] = {}
        self._generation = 0
        self._registry_lock = threading.Lock()
        self._logger = logger or get_app_logger()

    def get_or_compute(
        self,
        project_id: str,
        compute: Callable[[], FinancialSummary],
    ) -> FinancialSummary:
        """Return the fresh entry or compute, store and return a new one.

        Args:
            project_id: Key of the entry.
            compute: Callable reading the current store state.

        Returns:
            FinancialSummary: Summary consistent with the latest
            invalidation of the key.
        """
        with self._lock_for(project_id):
            with self._registry_lock:
                generation = self._generation
                token = self._tokens.get(project_id, 0)
                entry = self._entries.get(project_id)
            if entry is not None and entry.token == token:
                return entry.summary

            summary = compute()
            with self._registry_lock:
                if (
                    self._generation == generation
                    and self._tokens.get(project_id, 0) == token
                ):
                    self._entries[project_id] = _CacheEntry(summary, token)
                    return summary
            self._logger.debug(
                f"Discarded summary of {project_id} computed under a "
                "superseded token"
            )
            return summary

    def invalidate(self, project_id: str) -> None:
        """Mark the entry of a project stale.

        Returns only once no computation of the key is in flight.
        """
        with self._lock_for(project_id):
            with self._registry_lock:
                self._tokens[project_id] = self._tokens.get(project_id, 0) + 1
                self._entries.pop(project_id, None)

    def clear(self) -> None:
        """Drop every entry, token and lock.

        A computation still in flight belongs to the previous generation and
        is never stored.
        """
        with self._registry_lock:
            self._generation += 1
            self._entries = {}
            self._tokens = {}
            self._locks = {}

    def is_fresh(self, project_id: str) -> bool:
        """Return True when a fresh entry exists for the key."""
        with self._registry_lock:
            entry = self._entries.get(project_id)
            return (
                entry is not None
                and entry.token == self._tokens.get(project_id, 0)
            )

    def _lock_for(self, project_id: str) -> threading.RLock:
        with self._registry_lock:
            lock = self._locks.get(project_id)
            if lock is None:
                lock = threading.RLock()
                self._locks[project_id] = lock
            return lock


class NoOpSummaryCache(SummaryCachePort):
    """Cache that never stores; every read recomputes."""

    def get_or_compute(
        self,
        project_id: str,
        compute: Callable[[], FinancialSummary],
    ) -> FinancialSummary:
        return compute()

    def invalidate(self, project_id: str) -> None:
        return None

    def clear(self) -> None:
        return None


__all__ = ["InMemorySummaryCache", "NoOpSummaryCache"]
