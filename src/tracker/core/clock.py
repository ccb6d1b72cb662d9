"""Injectable time sources.

Code that stamps dates takes a ``Clock`` instead of reading the wall clock so
tests can pin "now" to a fixed instant.
"""

from datetime import UTC, date, datetime, tzinfo
from typing import Protocol


class Clock(Protocol):
    """Anything that can report the current, timezone-aware instant."""

    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock in a fixed zone (UTC by default)."""

    def __init__(self, tz: tzinfo = UTC):
        self.tz = tz

    def now(self) -> datetime:
        return datetime.now(self.tz)


class FixedClock:
    """Clock that always returns the same instant."""

    def __init__(self, instant: datetime, tz: tzinfo = UTC):
        if instant.tzinfo is None:
            raise ValueError("FixedClock requires a timezone-aware datetime")
        self.instant = instant
        self.tz = tz

    @classmethod
    def at_start_of_day(cls, day: date, tz: tzinfo = UTC) -> "FixedClock":
        """Clock fixed at midnight of ``day`` in ``tz``."""
        return cls(datetime(day.year, day.month, day.day, tzinfo=tz), tz)

    def now(self) -> datetime:
        return self.instant.astimezone(self.tz)


def today(clock: Clock) -> date:
    """Current calendar date as seen by ``clock`` in its own zone."""
    return clock.now().date()
