"""Gift domain – aggregates, the stock invariant and the events they record."""

from giftflow.domain.attribution import Attribution
from giftflow.domain.events import (
    GIFT_ATTRIBUTED,
    GIFT_REQUEST_APPROVED,
    GIFT_REQUEST_REJECTED,
    GIFT_REQUEST_SUBMITTED,
    STOCK_CHANGED,
)
from giftflow.domain.gift import Gift
from giftflow.domain.gift_request import GiftRequest, GiftRequestStatus
from giftflow.domain.resident import Resident
from giftflow.domain.stock import (
    DEFAULT_MAX_STOCK,
    InsufficientStockError,
    StockCeilingExceededError,
    StockQuantity,
)

__all__ = [
    "DEFAULT_MAX_STOCK",
    "GIFT_ATTRIBUTED",
    "GIFT_REQUEST_APPROVED",
    "GIFT_REQUEST_REJECTED",
    "GIFT_REQUEST_SUBMITTED",
    "STOCK_CHANGED",
    "Attribution",
    "Gift",
    "GiftRequest",
    "GiftRequestStatus",
    "InsufficientStockError",
    "Resident",
    "StockCeilingExceededError",
    "StockQuantity",
]
