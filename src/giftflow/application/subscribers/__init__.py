"""Application – subscribers reacting to gift domain events."""
from giftflow.application.subscribers.gift_attributed import GiftAttributedSubscriber
from giftflow.application.subscribers.gift_request_submitted import GiftRequestSubmittedSubscriber
from giftflow.application.subscribers.stock_changed import StockChangedSubscriber

__all__ = [
    "GiftAttributedSubscriber",
    "GiftRequestSubmittedSubscriber",
    "StockChangedSubscriber",
]
