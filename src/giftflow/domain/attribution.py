"""Attribution aggregate – a gift handed to a resident."""

from __future__ import annotations

from datetime import datetime

from giftflow.domain.events import gift_attributed
from giftflow.domain.gift import Gift
from giftflow.domain.resident import Resident
from giftflow.kernel.ddd import AggregateRoot
from giftflow.kernel.time import Clock, SystemClock
from giftflow.kernel.types import EntityId


class Attribution(AggregateRoot):
    def __init__(
        self,
        id: EntityId,  # noqa: A002
        resident_id: EntityId,
        gift_id: EntityId,
        attributed_at: datetime,
    ) -> None:
        super().__init__(id)
        self._resident_id = resident_id
        self._gift_id = gift_id
        self._attributed_at = attributed_at

    @classmethod
    def create(
        cls,
        id: EntityId,  # noqa: A002
        resident: Resident,
        gift: Gift,
        *,
        clock: Clock | None = None,
    ) -> "Attribution":
        """Create the attribution and record ``GiftAttributed``.

        The event carries the resident's and the gift's display data so
        subscribers never need to reload either.
        """
        attributed_at = (clock or SystemClock()).now()
        attribution = cls(id, resident.id, gift.id, attributed_at)
        attribution.record_that(
            gift_attributed(
                attribution_id=str(id),
                resident_id=str(resident.id),
                resident_name=resident.full_name,
                resident_email=str(resident.email),
                gift_id=str(gift.id),
                gift_name=gift.name,
                attributed_at=attributed_at,
            )
        )
        return attribution

    @property
    def resident_id(self) -> EntityId:
        return self._resident_id

    @property
    def gift_id(self) -> EntityId:
        return self._gift_id

    @property
    def attributed_at(self) -> datetime:
        return self._attributed_at


__all__ = ["Attribution"]
