"""Tests for clock implementations."""

from datetime import UTC, datetime, timedelta

from checkoutctl.domain.clock import FixedClock, SystemClock, days_from_now
from tests.conftest import NOW


def test_system_clock_is_utc_now() -> None:
    before = datetime.now(UTC)
    now = SystemClock().now()
    assert now.tzinfo is not None
    assert before <= now <= datetime.now(UTC)


def test_fixed_clock_advance() -> None:
    clock = FixedClock(NOW)
    assert clock.now() == NOW
    clock.advance(timedelta(hours=2))
    assert clock.now() == NOW + timedelta(hours=2)


def test_days_from_now() -> None:
    clock = FixedClock(NOW)
    assert days_from_now(clock, 7) == NOW + timedelta(days=7)
    assert days_from_now(clock, -1) == NOW - timedelta(days=1)
