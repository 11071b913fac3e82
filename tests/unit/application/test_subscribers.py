"""Unit tests for the gift event subscribers."""

from __future__ import annotations

from datetime import UTC, datetime

from structlog.testing import capture_logs

from giftflow.application.notifications import (
    InMemoryCertificateQueue,
    InMemoryNotifier,
    Notification,
)
from giftflow.application.publishing import SubscriberRegistry
from giftflow.application.subscribers import (
    GiftAttributedSubscriber,
    GiftRequestSubmittedSubscriber,
    StockChangedSubscriber,
)
from giftflow.domain import GIFT_ATTRIBUTED, GIFT_REQUEST_SUBMITTED, STOCK_CHANGED
from giftflow.domain.events import gift_attributed, gift_request_submitted, stock_changed

T0 = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


def _attributed():
    return gift_attributed(
        attribution_id="att-1",
        resident_id="res-1",
        resident_name="Alice Martin",
        resident_email="alice@example.com",
        gift_id="gift-1",
        gift_name="Teddy bear",
        attributed_at=T0,
    )


class BrokenNotifier:
    def send(self, notification: Notification) -> None:
        raise ConnectionError("smtp down")


# ---------------------------------------------------------------------------
# GiftAttributedSubscriber
# ---------------------------------------------------------------------------


class TestGiftAttributedSubscriber:
    def test_sends_confirmation_and_queues_certificate(self) -> None:
        notifier, queue = InMemoryNotifier(), InMemoryCertificateQueue()
        GiftAttributedSubscriber(notifier, queue).on_gift_attributed(_attributed())

        sent = notifier.last()
        assert sent is not None
        assert sent.to == "alice@example.com"
        assert "Teddy bear" in sent.body
        assert "att-1" in sent.body
        (request,) = queue.queued
        assert request.attribution_id == "att-1"
        assert request.attributed_at == T0.isoformat()

    def test_failed_confirmation_still_queues_certificate(self) -> None:
        queue = InMemoryCertificateQueue()
        with capture_logs() as logs:
            GiftAttributedSubscriber(BrokenNotifier(), queue).on_gift_attributed(_attributed())
        assert len(queue.queued) == 1
        assert any(log["event"] == "gift.confirmation_failed" for log in logs)

    def test_registers_for_gift_attributed(self) -> None:
        registry = SubscriberRegistry()
        registry.add_subscriber(GiftAttributedSubscriber(InMemoryNotifier(), InMemoryCertificateQueue()))
        assert registry.event_types() == [GIFT_ATTRIBUTED]


# ---------------------------------------------------------------------------
# GiftRequestSubmittedSubscriber
# ---------------------------------------------------------------------------


class TestGiftRequestSubmittedSubscriber:
    def _event(self):
        return gift_request_submitted("req-1", "Bob Durand", "bob@example.com", "Board game", T0)

    def test_acknowledges_requester(self) -> None:
        notifier = InMemoryNotifier()
        GiftRequestSubmittedSubscriber(notifier).on_gift_request_submitted(self._event())
        assert notifier.count == 1
        assert notifier.last().to == "bob@example.com"
        assert "req-1" in notifier.last().body

    def test_notifier_failure_is_logged_not_raised(self) -> None:
        with capture_logs() as logs:
            GiftRequestSubmittedSubscriber(BrokenNotifier()).on_gift_request_submitted(self._event())
        assert [log["event"] for log in logs] == [
            "gift_request.submitted",
            "gift_request.confirmation_failed",
        ]

    def test_subscribed_events(self) -> None:
        assert list(GiftRequestSubmittedSubscriber(InMemoryNotifier()).subscribed_events()) == [
            GIFT_REQUEST_SUBMITTED
        ]


# ---------------------------------------------------------------------------
# StockChangedSubscriber
# ---------------------------------------------------------------------------


class TestStockChangedSubscriber:
    def test_logs_new_level(self) -> None:
        with capture_logs() as logs:
            StockChangedSubscriber().on_stock_changed(stock_changed("gift-1", "Teddy bear", 10, 6, T0))
        assert len(logs) == 1
        assert logs[0]["event"] == "stock.changed"
        assert logs[0]["quantity"] == 6

    def test_warns_when_depleted(self) -> None:
        with capture_logs() as logs:
            StockChangedSubscriber().on_stock_changed(stock_changed("gift-1", "Teddy bear", 1, 0, T0))
        assert [(log["event"], log["log_level"]) for log in logs] == [
            ("stock.changed", "info"),
            ("stock.depleted", "warning"),
        ]

    def test_subscribed_events(self) -> None:
        assert list(StockChangedSubscriber().subscribed_events()) == [STOCK_CHANGED]
