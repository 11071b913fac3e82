"""Application event store – StoredEventRecord."""

from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any, Mapping

from giftflow.kernel.ddd import EventRecord


@dataclasses.dataclass(frozen=True)
class StoredEventRecord:
    """An :class:`EventRecord` as persisted in the append-only log.

    Only :class:`~giftflow.application.event_store.store.EventStore`
    implementations create these; nothing ever mutates or deletes one.
    """

    event: EventRecord
    """The recorded fact, unchanged."""

    store_id: str
    """Opaque identifier assigned by the store (UUID v7)."""

    sequence: int
    """1-based, gapless, strictly increasing position within the aggregate's history."""

    recorded_at: datetime
    """Wall-clock time when the store accepted the record."""

    @property
    def event_type(self) -> str:
        return self.event.event_type

    @property
    def aggregate_id(self) -> str:
        return self.event.aggregate_id

    @property
    def payload(self) -> Mapping[str, Any]:
        return self.event.payload

    @property
    def occurred_at(self) -> datetime:
        return self.event.occurred_at


__all__ = ["StoredEventRecord"]
