"""Application event store – EventStore port and InMemoryEventStore."""

from __future__ import annotations

import abc
import contextlib
import threading
from typing import Callable, Iterable, Iterator, Mapping, Sequence

from giftflow.application.event_store.stored_event import StoredEventRecord
from giftflow.kernel.ddd import EventRecord
from giftflow.kernel.errors import StoreWriteError
from giftflow.kernel.time import Clock, SystemClock
from giftflow.kernel.types import uuid7_str


class AggregateLocks:
    """One lock per aggregate id, created on first use.

    :meth:`hold` acquires the locks for several aggregates in sorted order,
    so two batches touching the same aggregates cannot deadlock.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}

    def lock_for(self, aggregate_id: str) -> threading.Lock:
        with self._guard:
            return self._locks.setdefault(aggregate_id, threading.Lock())

    @contextlib.contextmanager
    def hold(self, aggregate_ids: Iterable[str]) -> Iterator[None]:
        with contextlib.ExitStack() as stack:
            for aggregate_id in sorted(set(aggregate_ids)):
                stack.enter_context(self.lock_for(aggregate_id))
            yield


def next_sequences(
    events: Sequence[EventRecord],
    last_sequences: Mapping[str, int],
) -> list[int]:
    """Assign the next per-aggregate sequence number to each event, in order."""
    counters = dict(last_sequences)
    sequences: list[int] = []
    for event in events:
        counters[event.aggregate_id] = counters.get(event.aggregate_id, 0) + 1
        sequences.append(counters[event.aggregate_id])
    return sequences


def ensure_records(events: Iterable[object]) -> list[EventRecord]:
    """Materialise *events*, rejecting anything that is not an EventRecord."""
    batch = list(events)
    for index, event in enumerate(batch):
        if not isinstance(event, EventRecord):
            raise StoreWriteError(
                f"Cannot store {type(event).__name__} at index {index}: not an EventRecord",
                index=index,
            )
    return batch  # type: ignore[return-value]


class EventStore(abc.ABC):
    """Port – durable append-only log of domain events.

    Guarantees every implementation must keep:

    - sequence numbers are strictly increasing and gapless per aggregate;
    - appends for different aggregates may run concurrently, appends for the
      same aggregate are serialised;
    - :meth:`append_all` is all-or-nothing: on failure nothing from the batch
      is stored and a single :class:`StoreWriteError` names the failing index.
    """

    def append(self, event: EventRecord) -> StoredEventRecord:
        """Store one record and return it with its identity and sequence."""
        return self.append_all([event])[0]

    @abc.abstractmethod
    def append_all(self, events: Sequence[EventRecord]) -> list[StoredEventRecord]:
        """Store *events* in order as one atomic batch."""

    @abc.abstractmethod
    def find_by_aggregate(self, aggregate_id: str) -> list[StoredEventRecord]:
        """Return the aggregate's history in ascending sequence order."""

    @abc.abstractmethod
    def find_by_type(self, event_type: str) -> list[StoredEventRecord]:
        """Return every record of *event_type* in store order."""

    @abc.abstractmethod
    def find_all(self) -> list[StoredEventRecord]:
        """Return the full log in store order."""


class InMemoryEventStore(EventStore):
    """In-memory :class:`EventStore` for tests and local development."""

    def __init__(
        self,
        clock: Clock | None = None,
        id_factory: Callable[[], str] = uuid7_str,
    ) -> None:
        self._clock = clock or SystemClock()
        self._id_factory = id_factory
        self._locks = AggregateLocks()
        self._log_lock = threading.Lock()
        # aggregate_id → records ordered by sequence
        self._streams: dict[str, list[StoredEventRecord]] = {}
        self._log: list[StoredEventRecord] = []

    def append_all(self, events: Sequence[EventRecord]) -> list[StoredEventRecord]:
        batch = ensure_records(events)
        if not batch:
            return []

        with self._locks.hold(event.aggregate_id for event in batch):
            with self._log_lock:
                last = {
                    event.aggregate_id: len(self._streams.get(event.aggregate_id, ()))
                    for event in batch
                }
            recorded_at = self._clock.now()
            stored = [
                StoredEventRecord(
                    event=event,
                    store_id=self._id_factory(),
                    sequence=sequence,
                    recorded_at=recorded_at,
                )
                for event, sequence in zip(batch, next_sequences(batch, last))
            ]
            with self._log_lock:
                for record in stored:
                    self._streams.setdefault(record.aggregate_id, []).append(record)
                    self._log.append(record)
        return stored

    def find_by_aggregate(self, aggregate_id: str) -> list[StoredEventRecord]:
        with self._log_lock:
            return list(self._streams.get(aggregate_id, []))

    def find_by_type(self, event_type: str) -> list[StoredEventRecord]:
        with self._log_lock:
            return [r for r in self._log if r.event_type == event_type]

    def find_all(self) -> list[StoredEventRecord]:
        with self._log_lock:
            return list(self._log)

    def stream_version(self, aggregate_id: str) -> int:
        """Return the last sequence stored for *aggregate_id* (``0`` when none)."""
        with self._log_lock:
            return len(self._streams.get(aggregate_id, []))


__all__ = [
    "AggregateLocks",
    "EventStore",
    "InMemoryEventStore",
    "ensure_records",
    "next_sequences",
]
