"""
now() provides the notion of "when" for every rendered event. This module is used by
 - NamedEvent and LogLine, which read the clock each time they are rendered
 - TargetEvent, which reads it once at construction
 - tests, which drive a FixedClock by hand to get deterministic timestamps
"""

import math
from datetime import datetime, timedelta, timezone
from typing import Final

from eventreport.types.aliases import UnixSeconds

EPOCH: Final[datetime] = datetime(1970, 1, 1, tzinfo=timezone.utc)

# -------- Exceptions -----------------------------------------------------------


class ClockError(RuntimeError):
    """Raised when a clock operation would violate its invariants (e.g., going backward)."""


# -------- Utilities -------------------------------------------------------------


def to_unix_seconds(ts: datetime) -> UnixSeconds:
    """
    Whole seconds since the epoch, rounded half-up to the nearest second.
    Naive datetimes are interpreted as UTC.
    """
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    # round() would use banker's rounding; events stamped at x.5 must go up
    return int(math.floor(ts.timestamp() + 0.5))


# -------- SystemClock -----------------------------------------------------------


class SystemClock:
    """Clock adapter that returns the current UTC time."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


# -------- FixedClock ------------------------------------------------------------


class FixedClock:
    """
    Deterministic, manually-advanced clock.

    The caller drives the clock with `advance_to()` or `advance_by()`. All advances
    must be forward (monotonic). Useful wherever rendered timestamps must be
    reproducible, e.g. tests or replaying recorded events.
    """

    def __init__(self, start: datetime) -> None:
        if start.tzinfo is None:
            start = start.replace(tzinfo=timezone.utc)
        if start < EPOCH:
            raise ClockError(f"FixedClock: start must not precede the epoch: {start.isoformat()}")
        self._current = start

    def now(self) -> datetime:
        return self._current

    def advance_to(self, ts: datetime) -> datetime:
        """
        Move the clock forward to exactly ts.

        Returns the new current time. Raises ClockError on backward moves.
        """
        if ts.tzinfo is None:
            ts = ts.replace(tzinfo=timezone.utc)
        if ts < self._current:
            raise ClockError(
                f"FixedClock: cannot go backwards: {ts.isoformat()} < {self._current.isoformat()}"
            )
        self._current = ts
        return self._current

    def advance_by(self, seconds: float) -> datetime:
        """Move the clock forward by `seconds` (>= 0)."""
        if seconds < 0:
            raise ClockError(f"FixedClock: cannot go backwards, seconds < 0: {seconds}")
        return self.advance_to(self._current + timedelta(seconds=seconds))


SYSTEM_CLOCK: Final[SystemClock] = SystemClock()
