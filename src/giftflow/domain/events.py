"""Event types recorded by the gift domain, with their record factories.

Payload values are JSON-native (ids and timestamps as strings) so every
record round-trips through the event store unchanged.
"""

from __future__ import annotations

from datetime import datetime
from typing import Final

from giftflow.kernel.ddd import EventRecord

STOCK_CHANGED: Final = "StockChanged"
GIFT_ATTRIBUTED: Final = "GiftAttributed"
GIFT_REQUEST_SUBMITTED: Final = "GiftRequestSubmitted"
GIFT_REQUEST_APPROVED: Final = "GiftRequestApproved"
GIFT_REQUEST_REJECTED: Final = "GiftRequestRejected"


def stock_changed(
    gift_id: str,
    gift_name: str,
    previous_quantity: int,
    quantity: int,
    occurred_at: datetime,
) -> EventRecord:
    return EventRecord(
        event_type=STOCK_CHANGED,
        aggregate_id=gift_id,
        payload={
            "gift_id": gift_id,
            "gift_name": gift_name,
            "previous_quantity": previous_quantity,
            "quantity": quantity,
            "delta": quantity - previous_quantity,
        },
        occurred_at=occurred_at,
    )


def gift_attributed(
    attribution_id: str,
    resident_id: str,
    resident_name: str,
    resident_email: str,
    gift_id: str,
    gift_name: str,
    attributed_at: datetime,
) -> EventRecord:
    return EventRecord(
        event_type=GIFT_ATTRIBUTED,
        aggregate_id=attribution_id,
        payload={
            "attribution_id": attribution_id,
            "resident_id": resident_id,
            "resident_name": resident_name,
            "resident_email": resident_email,
            "gift_id": gift_id,
            "gift_name": gift_name,
            "attributed_at": attributed_at.isoformat(),
        },
        occurred_at=attributed_at,
    )


def gift_request_submitted(
    gift_request_id: str,
    requester_name: str,
    requester_email: str,
    requested_gift: str,
    submitted_at: datetime,
) -> EventRecord:
    return EventRecord(
        event_type=GIFT_REQUEST_SUBMITTED,
        aggregate_id=gift_request_id,
        payload={
            "gift_request_id": gift_request_id,
            "requester_name": requester_name,
            "requester_email": requester_email,
            "requested_gift": requested_gift,
            "submitted_at": submitted_at.isoformat(),
        },
        occurred_at=submitted_at,
    )


def gift_request_decided(
    event_type: str,
    gift_request_id: str,
    decided_at: datetime,
) -> EventRecord:
    return EventRecord(
        event_type=event_type,
        aggregate_id=gift_request_id,
        payload={
            "gift_request_id": gift_request_id,
            "decided_at": decided_at.isoformat(),
        },
        occurred_at=decided_at,
    )


__all__ = [
    "GIFT_ATTRIBUTED",
    "GIFT_REQUEST_APPROVED",
    "GIFT_REQUEST_REJECTED",
    "GIFT_REQUEST_SUBMITTED",
    "STOCK_CHANGED",
    "gift_attributed",
    "gift_request_decided",
    "gift_request_submitted",
    "stock_changed",
]
