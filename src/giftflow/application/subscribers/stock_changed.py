"""Subscribers – StockChanged."""
from __future__ import annotations

from typing import Any, Mapping

from giftflow.application.publishing import EventSubscriber, Subscriber
from giftflow.domain import STOCK_CHANGED
from giftflow.kernel.ddd import EventRecord
from giftflow.observability.logging import get_logger


class StockChangedSubscriber(EventSubscriber):
    """Logs every stock level change; warns when a gift runs out."""

    def __init__(self, *, logger: Any = None) -> None:
        self._log = logger or get_logger(__name__)

    def subscribed_events(self) -> Mapping[str, Subscriber]:
        return {STOCK_CHANGED: self.on_stock_changed}

    def on_stock_changed(self, event: EventRecord) -> None:
        payload = event.payload
        fields = {
            "gift_id": payload["gift_id"],
            "gift_name": payload["gift_name"],
            "previous_quantity": payload["previous_quantity"],
            "quantity": payload["quantity"],
        }
        self._log.info("stock.changed", **fields)
        if payload["quantity"] == 0:
            self._log.warning("stock.depleted", **fields)


__all__ = ["StockChangedSubscriber"]
