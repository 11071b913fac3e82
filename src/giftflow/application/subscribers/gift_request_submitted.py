"""Subscribers – GiftRequestSubmitted."""
from __future__ import annotations

from typing import Any, Mapping

from giftflow.application.notifications import Notification, Notifier
from giftflow.application.publishing import EventSubscriber, Subscriber
from giftflow.domain import GIFT_REQUEST_SUBMITTED
from giftflow.kernel.ddd import EventRecord
from giftflow.observability.logging import get_logger


class GiftRequestSubmittedSubscriber(EventSubscriber):
    """Acknowledges a submitted request to the requester."""

    def __init__(self, notifier: Notifier, *, logger: Any = None) -> None:
        self._notifier = notifier
        self._log = logger or get_logger(__name__)

    def subscribed_events(self) -> Mapping[str, Subscriber]:
        return {GIFT_REQUEST_SUBMITTED: self.on_gift_request_submitted}

    def on_gift_request_submitted(self, event: EventRecord) -> None:
        payload = event.payload
        self._log.info(
            "gift_request.submitted",
            gift_request_id=payload["gift_request_id"],
            requester_name=payload["requester_name"],
            requester_email=payload["requester_email"],
            requested_gift=payload["requested_gift"],
        )
        notification = Notification(
            to=payload["requester_email"],
            subject="Gift Request Confirmation",
            body=(
                f"Hello {payload['requester_name']},\n"
                f"we received your request for {payload['requested_gift']!r} "
                "and will review it shortly.\n"
                f"Reference: {payload['gift_request_id']}"
            ),
        )
        try:
            self._notifier.send(notification)
        except Exception as exc:  # noqa: BLE001
            self._log.error(
                "gift_request.confirmation_failed",
                gift_request_id=payload["gift_request_id"],
                error=str(exc),
            )


__all__ = ["GiftRequestSubmittedSubscriber"]
