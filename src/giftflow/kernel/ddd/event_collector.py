"""EventCollector – per-aggregate buffer of not-yet-published events."""

from __future__ import annotations

import threading

from giftflow.kernel.ddd.domain_event import EventRecord


class EventCollector:
    """Ordered in-memory buffer owned by exactly one aggregate instance.

    :meth:`drain` hands the buffered records over and resets the buffer in a
    single locked step: a record is drained at most once, and a record
    appended while another thread drains lands either in that drain or in
    the next one.  Never share an instance between aggregates.
    """

    __slots__ = ("_events", "_lock")

    def __init__(self) -> None:
        self._events: list[EventRecord] = []
        self._lock = threading.Lock()

    def record(self, event: EventRecord) -> None:
        """Append *event* to the buffer."""
        with self._lock:
            self._events.append(event)

    def drain(self) -> list[EventRecord]:
        """Return the buffered events in recording order and empty the buffer."""
        with self._lock:
            events, self._events = self._events, []
        return events

    def peek(self) -> tuple[EventRecord, ...]:
        """Snapshot of the buffer without draining it."""
        with self._lock:
            return tuple(self._events)

    @property
    def has_events(self) -> bool:
        with self._lock:
            return bool(self._events)

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)


__all__ = ["EventCollector"]
