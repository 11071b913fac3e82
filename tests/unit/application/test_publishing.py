"""Unit tests for the subscriber registry, EventPublisher and CommitHook."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Mapping

import pytest
from structlog.testing import capture_logs

from giftflow.application.event_store import InMemoryEventStore
from giftflow.application.publishing import (
    CommitHook,
    EventPublisher,
    EventSubscriber,
    RegistryFrozenError,
    Subscriber,
    SubscriberRegistry,
)
from giftflow.kernel.ddd import EventRecord
from giftflow.kernel.errors import StoreWriteError
from giftflow.testing.fakes import FailingEventStore, FailingSubscriber, RecordingSubscriber

T0 = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


def _rec(event_type: str = "StockChanged", aggregate_id: str = "gift-1", **payload: object) -> EventRecord:
    return EventRecord(event_type, aggregate_id, payload, T0)


class Source:
    """Minimal EventSource that hands out a fixed list once."""

    def __init__(self, *events: EventRecord) -> None:
        self._events = list(events)
        self.pulls = 0

    def pull_domain_events(self) -> list[EventRecord]:
        self.pulls += 1
        events, self._events = self._events, []
        return events


# ---------------------------------------------------------------------------
# SubscriberRegistry
# ---------------------------------------------------------------------------


class TestSubscriberRegistry:
    def test_handlers_in_registration_order(self, registry: SubscriberRegistry) -> None:
        first, second = RecordingSubscriber(), RecordingSubscriber()
        registry.subscribe("X", first)
        registry.subscribe("X", second)
        assert registry.handlers_for("X") == (first, second)
        assert registry.handlers_for("Y") == ()
        assert len(registry) == 2

    def test_on_decorator(self, registry: SubscriberRegistry) -> None:
        @registry.on("X")
        def handler(event: EventRecord) -> None: ...

        assert registry.handlers_for("X") == (handler,)

    def test_add_subscriber_object(self, registry: SubscriberRegistry) -> None:
        class Audit(EventSubscriber):
            def __init__(self) -> None:
                self.seen: list[str] = []

            def subscribed_events(self) -> Mapping[str, Subscriber]:
                return {"A": self.seen_it, "B": self.seen_it}

            def seen_it(self, event: EventRecord) -> None:
                self.seen.append(event.event_type)

        audit = Audit()
        registry.add_subscriber(audit)
        assert sorted(registry.event_types()) == ["A", "B"]

    def test_freeze_rejects_new_subscriptions(self, registry: SubscriberRegistry) -> None:
        registry.freeze()
        assert registry.frozen
        with pytest.raises(RegistryFrozenError):
            registry.subscribe("X", RecordingSubscriber())

    def test_rejects_non_callable(self, registry: SubscriberRegistry) -> None:
        with pytest.raises(TypeError):
            registry.subscribe("X", "nope")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# EventPublisher
# ---------------------------------------------------------------------------


class TestEventPublisher:
    def test_appends_then_dispatches(
        self, publisher: EventPublisher, store: InMemoryEventStore, registry: SubscriberRegistry
    ) -> None:
        seen_stored: list[int] = []
        registry.subscribe("StockChanged", lambda e: seen_stored.append(len(store.find_all())))
        publisher.publish([_rec(n=1), _rec(n=2)])
        assert len(store.find_all()) == 2
        assert seen_stored == [2, 2]

    def test_dispatch_in_event_order(self, publisher: EventPublisher, registry: SubscriberRegistry) -> None:
        recorder = RecordingSubscriber()
        registry.subscribe("A", recorder)
        registry.subscribe("B", recorder)
        events = [_rec("A", n=1), _rec("B", n=2), _rec("A", n=3)]
        publisher.publish(events)
        assert recorder.received == events

    def test_empty_batch_is_noop(self, publisher: EventPublisher, store: InMemoryEventStore) -> None:
        publisher.publish([])
        assert store.find_all() == []

    def test_publish_one(self, publisher: EventPublisher, store: InMemoryEventStore, registry: SubscriberRegistry) -> None:
        recorder = RecordingSubscriber()
        registry.subscribe("StockChanged", recorder)
        publisher.publish_one(_rec())
        assert recorder.count == 1
        assert store.find_all()[0].sequence == 1

    def test_store_failure_still_delivers(self, registry: SubscriberRegistry) -> None:
        recorder = RecordingSubscriber()
        registry.subscribe("StockChanged", recorder)
        store = FailingEventStore()
        publisher = EventPublisher(store, registry)

        with capture_logs() as logs:
            publisher.publish([_rec(n=1), _rec(n=2)])

        assert recorder.count == 2
        assert store.find_all() == []
        failures = [log for log in logs if log["event"] == "event_store.append_failed"]
        assert len(failures) == 1
        assert failures[0]["log_level"] == "error"
        assert failures[0]["failed_index"] == 0
        assert failures[0]["error_code"] == "store_write_error"
        assert failures[0]["event_count"] == 2

    def test_fail_on_store_error_blocks_dispatch(self, registry: SubscriberRegistry) -> None:
        recorder = RecordingSubscriber()
        registry.subscribe("StockChanged", recorder)
        publisher = EventPublisher(FailingEventStore(), registry, fail_on_store_error=True)

        with pytest.raises(StoreWriteError):
            publisher.publish([_rec()])
        assert recorder.count == 0

    def test_fail_on_store_error_wraps_foreign_exceptions(self, registry: SubscriberRegistry) -> None:
        class BrokenStore(InMemoryEventStore):
            def append_all(self, events):  # type: ignore[override]
                raise OSError("disk full")

        publisher = EventPublisher(BrokenStore(), registry, fail_on_store_error=True)
        with pytest.raises(StoreWriteError) as exc_info:
            publisher.publish([_rec()])
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_failing_subscriber_does_not_block_sibling(self, registry: SubscriberRegistry, publisher: EventPublisher) -> None:
        failing = FailingSubscriber(ValueError("smtp down"))
        recorder = RecordingSubscriber()
        registry.subscribe("StockChanged", failing)
        registry.subscribe("StockChanged", recorder)

        with capture_logs() as logs:
            publisher.publish([_rec(n=1), _rec(n=2)])

        assert failing.calls == 2
        assert recorder.count == 2
        failures = [log for log in logs if log["event"] == "subscriber.failed"]
        assert len(failures) == 2
        assert failures[0]["exc_info"] is True
        assert "FailingSubscriber" in failures[0]["subscriber"]
        assert failures[0]["event_type"] == "StockChanged"


# ---------------------------------------------------------------------------
# CommitHook
# ---------------------------------------------------------------------------


class TestCommitHook:
    def test_drains_all_then_publishes_once(self) -> None:
        batches: list[list[EventRecord]] = []

        class SpyPublisher:
            def publish(self, events):
                batches.append(list(events))

        a1, a2, b1 = _rec(aggregate_id="a", n=1), _rec(aggregate_id="a", n=2), _rec(aggregate_id="b")
        first, second = Source(a1, a2), Source(b1)
        drained = CommitHook(SpyPublisher()).after_commit([first, second])

        assert drained == [a1, a2, b1]
        assert batches == [[a1, a2, b1]]

    def test_nothing_drained_nothing_published(self) -> None:
        calls: list[object] = []

        class SpyPublisher:
            def publish(self, events):
                calls.append(events)

        CommitHook(SpyPublisher()).after_commit([Source(), Source()])
        assert calls == []

    def test_same_aggregate_drained_once(self, commit_hook: CommitHook) -> None:
        source = Source(_rec())
        commit_hook.after_commit([source, source])
        assert source.pulls == 1

    def test_wired_to_real_publisher(self, commit_hook: CommitHook, store: InMemoryEventStore) -> None:
        commit_hook([Source(_rec(n=1), _rec(n=2))])
        assert [r.sequence for r in store.find_all()] == [1, 2]
