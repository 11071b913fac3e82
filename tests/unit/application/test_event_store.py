"""Unit tests for the in-memory EventStore."""

from __future__ import annotations

import threading
from datetime import UTC, datetime

import pytest

from giftflow.application.event_store import (
    AggregateLocks,
    InMemoryEventStore,
    StoredEventRecord,
    next_sequences,
)
from giftflow.kernel.ddd import EventRecord
from giftflow.kernel.errors import StoreWriteError
from giftflow.testing.fakes import FailingEventStore

T0 = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


def _rec(aggregate_id: str = "gift-1", event_type: str = "StockChanged", **payload: object) -> EventRecord:
    return EventRecord(event_type, aggregate_id, payload, T0)


# ---------------------------------------------------------------------------
# Sequencing
# ---------------------------------------------------------------------------


class TestSequencing:
    def test_batch_gets_one_to_three(self, store: InMemoryEventStore) -> None:
        stored = store.append_all([_rec(n=1), _rec(n=2), _rec(n=3)])
        assert [s.sequence for s in stored] == [1, 2, 3]

    def test_continues_from_existing_history(self, store: InMemoryEventStore) -> None:
        for _ in range(4):
            store.append(_rec())
        stored = store.append_all([_rec(), _rec(), _rec()])
        assert [s.sequence for s in stored] == [5, 6, 7]
        assert store.stream_version("gift-1") == 7

    def test_sequences_are_per_aggregate(self, store: InMemoryEventStore) -> None:
        stored = store.append_all([_rec("a"), _rec("b"), _rec("a"), _rec("b"), _rec("a")])
        assert [(s.aggregate_id, s.sequence) for s in stored] == [
            ("a", 1), ("b", 1), ("a", 2), ("b", 2), ("a", 3),
        ]

    def test_next_sequences_helper(self) -> None:
        events = [_rec("a"), _rec("b"), _rec("a")]
        assert next_sequences(events, {"a": 3}) == [4, 1, 5]

    def test_empty_batch(self, store: InMemoryEventStore) -> None:
        assert store.append_all([]) == []
        assert store.find_all() == []


# ---------------------------------------------------------------------------
# Stored records and queries
# ---------------------------------------------------------------------------


class TestStoredRecords:
    def test_stored_record_wraps_event(self, store: InMemoryEventStore) -> None:
        event = _rec(quantity=6)
        stored = store.append(event)
        assert isinstance(stored, StoredEventRecord)
        assert stored.event is event
        assert stored.store_id == "stored-1"
        assert stored.recorded_at == T0
        assert stored.payload == {"quantity": 6}
        assert stored.occurred_at == T0

    def test_store_ids_are_uuid_v7_by_default(self) -> None:
        import uuid

        stored = InMemoryEventStore().append(_rec())
        assert uuid.UUID(stored.store_id).version == 7

    def test_find_by_aggregate_in_sequence_order(self, store: InMemoryEventStore) -> None:
        store.append_all([_rec("a", n=1), _rec("b"), _rec("a", n=2)])
        history = store.find_by_aggregate("a")
        assert [h.payload["n"] for h in history] == [1, 2]
        assert [h.sequence for h in history] == [1, 2]
        assert store.find_by_aggregate("missing") == []

    def test_find_by_type_and_find_all(self, store: InMemoryEventStore) -> None:
        store.append_all([_rec("a"), _rec("b", event_type="GiftAttributed"), _rec("c")])
        assert [r.aggregate_id for r in store.find_by_type("StockChanged")] == ["a", "c"]
        assert [r.aggregate_id for r in store.find_all()] == ["a", "b", "c"]

    def test_returned_lists_are_copies(self, store: InMemoryEventStore) -> None:
        store.append(_rec())
        store.find_all().clear()
        assert len(store.find_all()) == 1


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


class TestFailures:
    def test_rejects_non_records_without_storing_anything(self, store: InMemoryEventStore) -> None:
        with pytest.raises(StoreWriteError) as exc_info:
            store.append_all([_rec(), "not a record"])  # type: ignore[list-item]
        assert exc_info.value.index == 1
        assert store.find_all() == []

    def test_failing_store_is_all_or_nothing(self) -> None:
        store = FailingEventStore(fail_on="GiftAttributed")
        with pytest.raises(StoreWriteError) as exc_info:
            store.append_all([_rec("a"), _rec("b", event_type="GiftAttributed")])
        assert exc_info.value.index == 1
        assert store.find_all() == []
        assert store.append(_rec("a")).sequence == 1


# ---------------------------------------------------------------------------
# Concurrency
# ---------------------------------------------------------------------------


class TestConcurrency:
    def test_concurrent_appends_stay_gapless(self) -> None:
        store = InMemoryEventStore()
        aggregates = ["a", "b", "c"]

        def worker(worker_id: int) -> None:
            for n in range(50):
                batch = [_rec(agg, w=worker_id, n=n) for agg in aggregates]
                store.append_all(batch)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(6)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        for agg in aggregates:
            sequences = [r.sequence for r in store.find_by_aggregate(agg)]
            assert sequences == list(range(1, 6 * 50 + 1))

    def test_aggregate_locks_hold_in_sorted_order(self) -> None:
        locks = AggregateLocks()
        with locks.hold(["b", "a", "b"]):
            assert locks.lock_for("a").locked()
            assert locks.lock_for("b").locked()
        assert not locks.lock_for("a").locked()
