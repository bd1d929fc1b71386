"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from budget_tracker.infrastructure.logging.logger import get_app_logger


READ_MODE_CACHED = "cached"
READ_MODE_ON_DEMAND = "on_demand"
READ_MODES = (READ_MODE_CACHED, READ_MODE_ON_DEMAND)


@dataclass(frozen=True)
class BudgetSettings:
    """Settings for reading financial summaries.

    Attributes:
        summary_read_mode: ``cached`` to serve summaries from the projection
            cache, ``on_demand`` to recompute them on every read.
    """

    summary_read_mode: str = READ_MODE_CACHED

    @property
    def uses_cache(self) -> bool:
        return self.summary_read_mode == READ_MODE_CACHED

    @classmethod
    def from_env(cls) -> "BudgetSettings":
        """Build settings from environment variables.

        Returns:
            BudgetSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        raw_mode = os.getenv("SUMMARY_READ_MODE", READ_MODE_CACHED)
        mode = raw_mode.strip().lower().replace("-", "_")
        if mode not in READ_MODES:
            get_app_logger().warning(
                f"Unknown SUMMARY_READ_MODE '{raw_mode}'; "
                f"falling back to {READ_MODE_CACHED}"
            )
            mode = READ_MODE_CACHED
        return cls(summary_read_mode=mode)


__all__ = [
    "BudgetSettings",
    "READ_MODE_CACHED",
    "READ_MODE_ON_DEMAND",
    "READ_MODES",
]
