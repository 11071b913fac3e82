"""Application gifts – use-case level errors."""
from __future__ import annotations

from giftflow.kernel.errors import ApplicationError


class GiftAttributionFailedError(ApplicationError):
    """An attribution could not be completed.

    ``reason`` is a stable slug callers can branch on
    (``"stock_depleted"``, ``"concurrent_modification"``).
    """

    default_code = "gift_attribution_failed"

    def __init__(
        self,
        message: str,
        *,
        resident_id: str,
        gift_id: str,
        reason: str,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(
            message,
            detail={"resident_id": resident_id, "gift_id": gift_id, "reason": reason},
            cause=cause,
        )
        self.resident_id = resident_id
        self.gift_id = gift_id
        self.reason = reason

    @classmethod
    def stock_depleted(
        cls,
        resident_id: str,
        gift_id: str,
        gift_name: str,
        *,
        cause: BaseException | None = None,
    ) -> GiftAttributionFailedError:
        return cls(
            f"Gift attribution failed: {gift_name!r} is out of stock",
            resident_id=resident_id,
            gift_id=gift_id,
            reason="stock_depleted",
            cause=cause,
        )

    @classmethod
    def concurrent_modification(
        cls,
        resident_id: str,
        gift_id: str,
        *,
        cause: BaseException | None = None,
    ) -> GiftAttributionFailedError:
        return cls(
            "Gift attribution failed: concurrent modification detected",
            resident_id=resident_id,
            gift_id=gift_id,
            reason="concurrent_modification",
            cause=cause,
        )


__all__ = ["GiftAttributionFailedError"]
