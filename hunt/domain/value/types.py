"""Domain value types for Local Hunt."""

from datetime import timedelta
from enum import Enum


class Timeframe(str, Enum):
    """Trailing window used to rank trending products."""

    DAILY = "daily"
    WEEKLY = "weekly"

    @property
    def window(self) -> timedelta:
        """Length of the window, measured back from the moment of the query."""
        if self is Timeframe.WEEKLY:
            return timedelta(days=7)
        return timedelta(hours=24)
