"""Unit tests for kernel time."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from giftflow.kernel.time import Clock, FrozenClock, SystemClock, utc_now
from giftflow.testing.fakes import FakeClock


class TestSystemClock:
    def test_now_is_timezone_aware(self) -> None:
        assert SystemClock().now().tzinfo is not None

    def test_satisfies_clock_protocol(self) -> None:
        clock: Clock = SystemClock()
        assert isinstance(clock.now(), datetime)

    def test_utc_now_is_utc(self) -> None:
        assert utc_now().utcoffset() == timedelta(0)


class TestFrozenClock:
    def test_returns_fixed_time(self) -> None:
        fixed = datetime(2024, 5, 1, tzinfo=UTC)
        clock = FrozenClock(fixed)
        assert clock.now() == fixed
        assert clock.now() == fixed

    def test_normalises_to_utc(self) -> None:
        paris = timezone(timedelta(hours=2))
        clock = FrozenClock(datetime(2024, 5, 1, 14, 0, tzinfo=paris))
        assert clock.now() == datetime(2024, 5, 1, 12, 0, tzinfo=UTC)
        assert clock.now().utcoffset() == timedelta(0)

    def test_rejects_naive_datetime(self) -> None:
        with pytest.raises(ValueError):
            FrozenClock(datetime(2024, 5, 1))

    def test_advance_with_kwargs(self) -> None:
        clock = FrozenClock(datetime(2024, 5, 1, tzinfo=UTC))
        assert clock.advance(hours=2, minutes=30) == datetime(2024, 5, 1, 2, 30, tzinfo=UTC)
        assert clock.now() == datetime(2024, 5, 1, 2, 30, tzinfo=UTC)

    def test_advance_with_timedelta(self) -> None:
        clock = FrozenClock(datetime(2024, 5, 1, tzinfo=UTC))
        clock.advance(timedelta(days=1))
        assert clock.now() == datetime(2024, 5, 2, tzinfo=UTC)


class TestFakeClock:
    def test_is_pinned(self) -> None:
        assert FakeClock().now() == datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

    def test_instances_are_independent(self) -> None:
        first, second = FakeClock(), FakeClock()
        first.advance(seconds=5)
        assert second.now() == datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
