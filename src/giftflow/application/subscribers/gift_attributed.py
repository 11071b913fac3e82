"""Subscribers – GiftAttributed."""
from __future__ import annotations

from typing import Any, Mapping

from giftflow.application.notifications import (
    CertificateQueue,
    CertificateRequest,
    Notification,
    Notifier,
)
from giftflow.application.publishing import EventSubscriber, Subscriber
from giftflow.domain import GIFT_ATTRIBUTED
from giftflow.kernel.ddd import EventRecord
from giftflow.observability.logging import get_logger


class GiftAttributedSubscriber(EventSubscriber):
    """Confirms an attribution to the resident and queues the certificate.

    The two steps are independent: a failed confirmation is logged and the
    certificate is still queued.
    """

    def __init__(
        self,
        notifier: Notifier,
        certificates: CertificateQueue,
        *,
        sender: str = "noreply@example.com",
        logger: Any = None,
    ) -> None:
        self._notifier = notifier
        self._certificates = certificates
        self._sender = sender
        self._log = logger or get_logger(__name__)

    def subscribed_events(self) -> Mapping[str, Subscriber]:
        return {GIFT_ATTRIBUTED: self.on_gift_attributed}

    def on_gift_attributed(self, event: EventRecord) -> None:
        payload = event.payload
        self._log.info(
            "gift.attributed",
            attribution_id=payload["attribution_id"],
            resident_name=payload["resident_name"],
            gift_name=payload["gift_name"],
        )
        self._send_confirmation(payload)
        self._queue_certificate(payload)

    def _send_confirmation(self, payload: Mapping[str, Any]) -> None:
        notification = Notification(
            to=payload["resident_email"],
            subject="Gift Attribution Confirmation",
            body=(
                f"Congratulations {payload['resident_name']}!\n"
                f"A gift has been attributed to you: {payload['gift_name']}.\n"
                "You will receive your gift certificate shortly by email.\n"
                f"Attribution ID: {payload['attribution_id']}"
            ),
        )
        try:
            self._notifier.send(notification)
        except Exception as exc:  # noqa: BLE001
            self._log.error(
                "gift.confirmation_failed",
                attribution_id=payload["attribution_id"],
                error=str(exc),
            )
            return
        self._log.info(
            "gift.confirmation_sent",
            attribution_id=payload["attribution_id"],
            email=payload["resident_email"],
        )

    def _queue_certificate(self, payload: Mapping[str, Any]) -> None:
        request = CertificateRequest(
            attribution_id=payload["attribution_id"],
            resident_name=payload["resident_name"],
            resident_email=payload["resident_email"],
            gift_name=payload["gift_name"],
            attributed_at=payload["attributed_at"],
        )
        try:
            self._certificates.enqueue(request)
        except Exception as exc:  # noqa: BLE001
            self._log.error(
                "gift.certificate_queue_failed",
                attribution_id=payload["attribution_id"],
                error=str(exc),
            )
            return
        self._log.info("gift.certificate_queued", attribution_id=payload["attribution_id"])


__all__ = ["GiftAttributedSubscriber"]
