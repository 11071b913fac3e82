"""Application – gift use cases."""
from giftflow.application.gifts.attribute_gift import (
    AttributeGift,
    AttributeGiftHandler,
    AttributionResult,
)
from giftflow.application.gifts.errors import GiftAttributionFailedError
from giftflow.application.gifts.manage_stock import (
    CreateGift,
    CreateGiftHandler,
    RestockGift,
    RestockGiftHandler,
)
from giftflow.application.gifts.submit_gift_request import (
    SubmitGiftRequest,
    SubmitGiftRequestHandler,
)

__all__ = [
    "AttributeGift",
    "AttributeGiftHandler",
    "AttributionResult",
    "CreateGift",
    "CreateGiftHandler",
    "GiftAttributionFailedError",
    "RestockGift",
    "RestockGiftHandler",
    "SubmitGiftRequest",
    "SubmitGiftRequestHandler",
]
