"""AggregateRoot – records domain events through an owned EventCollector."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from giftflow.kernel.ddd.domain_event import EventRecord
from giftflow.kernel.ddd.entity import Entity
from giftflow.kernel.ddd.event_collector import EventCollector
from giftflow.kernel.types.ids import EntityId


@runtime_checkable
class EventSource(Protocol):
    """Anything the commit hook can drain: exposes ``pull_domain_events``."""

    def pull_domain_events(self) -> list[EventRecord]: ...


class AggregateRoot(Entity):
    """Aggregate root – owns one :class:`EventCollector` and enforces invariants.

    Subclasses call :meth:`record_that` only after a state transition has
    passed validation, so a failed operation never leaves an event behind.
    """

    _version: int
    _collector: EventCollector

    def __init__(self, id: EntityId) -> None:  # noqa: A002
        super().__init__(id)
        self._version = 0
        self._collector = EventCollector()

    def record_that(self, event: EventRecord) -> None:
        """Buffer a domain event and bump the version."""
        self._collector.record(event)
        self._version += 1

    def pull_domain_events(self) -> list[EventRecord]:
        """Return and clear pending domain events."""
        return self._collector.drain()

    @property
    def pending_events(self) -> tuple[EventRecord, ...]:
        return self._collector.peek()

    @property
    def has_domain_events(self) -> bool:
        return self._collector.has_events

    @property
    def version(self) -> int:
        return self._version


__all__ = ["AggregateRoot", "EventSource"]
