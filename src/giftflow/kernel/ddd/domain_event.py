"""Domain event records."""

from __future__ import annotations

import dataclasses
from datetime import UTC, datetime
from types import MappingProxyType
from typing import Any, Mapping

from giftflow.kernel.errors.domain import ValidationError
from giftflow.kernel.time import utc_now


@dataclasses.dataclass(frozen=True)
class EventRecord:
    """Immutable description of one business fact that already happened.

    ``payload`` is copied on construction and exposed read-only, so neither
    the producer nor a subscriber can change a record after the fact.  The
    record carries no identity of its own; the event store assigns one.
    ``occurred_at`` must be timezone-aware and is stored in UTC.

    Example::

        EventRecord(
            event_type="StockChanged",
            aggregate_id=str(gift.id),
            payload={"quantity": 6, "delta": -4},
        )
    """

    event_type: str
    aggregate_id: str
    payload: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    occurred_at: datetime = dataclasses.field(default_factory=utc_now)

    def __post_init__(self) -> None:
        if not self.event_type:
            raise ValidationError("event_type must not be empty")
        if not self.aggregate_id:
            raise ValidationError("aggregate_id must not be empty")
        if self.occurred_at.tzinfo is None or self.occurred_at.utcoffset() is None:
            raise ValidationError(
                "occurred_at must be timezone-aware",
                violations={"occurred_at": "naive datetime"},
            )
        object.__setattr__(self, "occurred_at", self.occurred_at.astimezone(UTC))
        object.__setattr__(self, "payload", MappingProxyType(dict(self.payload)))

    def __hash__(self) -> int:
        return hash((self.event_type, self.aggregate_id, self.occurred_at))

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict view (payload copied), suitable for logs and JSON."""
        return {
            "event_type": self.event_type,
            "aggregate_id": self.aggregate_id,
            "payload": dict(self.payload),
            "occurred_at": self.occurred_at.isoformat(),
        }


__all__ = ["EventRecord"]
