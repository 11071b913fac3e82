"""Application gifts – AttributeGift command and handler."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any, Callable

from giftflow.application.cqrs import Command, CommandHandler
from giftflow.application.gifts.errors import GiftAttributionFailedError
from giftflow.application.uow import TrackingUnitOfWork
from giftflow.domain import Attribution, Gift, InsufficientStockError, Resident
from giftflow.kernel.ddd import Repository
from giftflow.kernel.time import Clock, SystemClock
from giftflow.kernel.types import EntityId, IdGenerator, UuidV7Generator


@dataclasses.dataclass(frozen=True)
class AttributeGift(Command):
    resident_id: EntityId
    gift_id: EntityId


@dataclasses.dataclass(frozen=True)
class AttributionResult:
    attribution_id: str
    resident_id: str
    resident_name: str
    gift_id: str
    gift_name: str
    attributed_at: datetime
    remaining_stock: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "attribution_id": self.attribution_id,
            "resident": {"id": self.resident_id, "name": self.resident_name},
            "gift": {"id": self.gift_id, "name": self.gift_name},
            "attributed_at": self.attributed_at.isoformat(),
            "remaining_stock": self.remaining_stock,
        }


class AttributeGiftHandler(CommandHandler[AttributeGift]):
    """Hand one unit of a gift to a resident.

    The stock decrease is the final, in-transaction availability check; a
    depleted gift aborts the unit of work, so neither the stock change nor
    the attribution is ever published.

    Raises:
        NotFoundError: the resident or the gift does not exist.
        GiftAttributionFailedError: the gift ran out of stock
            (``reason == "stock_depleted"``).
    """

    def __init__(
        self,
        uow_factory: Callable[[], TrackingUnitOfWork],
        residents: Repository[Resident],
        gifts: Repository[Gift],
        attributions: Repository[Attribution],
        *,
        id_generator: IdGenerator | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._uow_factory = uow_factory
        self._residents = residents
        self._gifts = gifts
        self._attributions = attributions
        self._ids = id_generator or UuidV7Generator()
        self._clock = clock or SystemClock()

    def handle(self, command: AttributeGift) -> AttributionResult:
        with self._uow_factory() as uow:
            resident = self._residents.get_or_raise(command.resident_id)
            gift = self._gifts.get_or_raise(command.gift_id)

            try:
                gift.decrease()
            except InsufficientStockError as exc:
                raise GiftAttributionFailedError.stock_depleted(
                    str(resident.id), str(gift.id), gift.name, cause=exc
                ) from exc

            attribution = Attribution.create(
                self._ids.generate(), resident, gift, clock=self._clock
            )
            self._gifts.save(gift)
            self._attributions.save(attribution)
            uow.track(gift, attribution)

        return AttributionResult(
            attribution_id=str(attribution.id),
            resident_id=str(resident.id),
            resident_name=resident.full_name,
            gift_id=str(gift.id),
            gift_name=gift.name,
            attributed_at=attribution.attributed_at,
            remaining_stock=gift.quantity,
        )


__all__ = ["AttributeGift", "AttributeGiftHandler", "AttributionResult"]
