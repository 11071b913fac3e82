"""Application publishing – CommitHook."""
from __future__ import annotations

from typing import Iterable

from giftflow.application.publishing.publisher import DomainEventPublisher
from giftflow.kernel.ddd import EventRecord, EventSource


class CommitHook:
    """Runs once after a successful commit.

    Drains every touched aggregate in the order given, then hands the whole
    batch to the publisher in a single call.  Never call it on rollback.
    """

    def __init__(self, publisher: DomainEventPublisher) -> None:
        self._publisher = publisher

    def after_commit(self, touched: Iterable[EventSource]) -> list[EventRecord]:
        events: list[EventRecord] = []
        seen: set[int] = set()
        for aggregate in touched:
            if id(aggregate) in seen:
                continue
            seen.add(id(aggregate))
            events.extend(aggregate.pull_domain_events())
        if events:
            self._publisher.publish(events)
        return events

    __call__ = after_commit


__all__ = ["CommitHook"]
