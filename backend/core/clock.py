"""
Time source for lifecycle hooks, predicates and transitions.

Every function that needs "now" takes it as an argument; the write path
obtains it from a Clock so tests can pin time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import Callable

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Naive UTC now, matching the DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


@dataclass
class FixedClock:
    """Clock pinned to a settable instant."""

    current: datetime = field(default_factory=system_clock)

    def __call__(self) -> datetime:
        return self.current

    def today(self) -> date:
        return self.current.date()

    def advance(self, **delta: float) -> datetime:
        """Move forward by timedelta keyword arguments (days=3, hours=2, ...)."""
        self.current = self.current + timedelta(**delta)
        return self.current

    def set(self, instant: datetime) -> None:
        self.current = instant
