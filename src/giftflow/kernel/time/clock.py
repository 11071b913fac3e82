"""Kernel time – where aggregates and event stores read "now" from."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Source of timezone-aware timestamps for events and stored records."""

    def now(self) -> datetime: ...


def utc_now() -> datetime:
    return datetime.now(UTC)


class SystemClock:
    def now(self) -> datetime:
        return utc_now()


class FrozenClock:
    """Clock that only moves when :meth:`advance` is called.

    Naive datetimes are rejected; the pinned instant is normalised to UTC.
    """

    def __init__(self, fixed: datetime) -> None:
        if fixed.tzinfo is None:
            raise ValueError(f"FrozenClock needs a timezone-aware datetime, got {fixed!r}")
        self._current = fixed.astimezone(UTC)

    def now(self) -> datetime:
        return self._current

    def advance(self, delta: timedelta | None = None, **kwargs: float) -> datetime:
        """Move forward by *delta* (or ``timedelta(**kwargs)``) and return the new instant."""
        self._current += delta if delta is not None else timedelta(**kwargs)
        return self._current


__all__ = ["Clock", "FrozenClock", "SystemClock", "utc_now"]
