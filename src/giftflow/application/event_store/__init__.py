"""Application – append-only event store."""

from giftflow.application.event_store.store import (
    AggregateLocks,
    EventStore,
    InMemoryEventStore,
    ensure_records,
    next_sequences,
)
from giftflow.application.event_store.stored_event import StoredEventRecord

__all__ = [
    "AggregateLocks",
    "EventStore",
    "InMemoryEventStore",
    "StoredEventRecord",
    "ensure_records",
    "next_sequences",
]
