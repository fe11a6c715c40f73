"""Clock capability for expiry checks.

Items never read the wall clock directly; they ask a :class:`Clock`.
Production code uses :class:`SystemClock`, tests pin time with
:class:`FixedClock`.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Anything that can report the current instant."""

    def now(self) -> datetime: ...


class SystemClock:
    """Current UTC wall-clock time."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedClock:
    """A clock pinned to one instant, moved only by :meth:`advance`."""

    def __init__(self, instant: datetime) -> None:
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def advance(self, delta: timedelta) -> None:
        self._instant += delta


def days_from_now(clock: Clock, days: int) -> datetime:
    """Instant *days* days after ``clock.now()`` (negative for the past)."""
    return clock.now() + timedelta(days=days)
