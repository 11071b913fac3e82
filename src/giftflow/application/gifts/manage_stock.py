"""Application gifts – CreateGift and RestockGift."""
from __future__ import annotations

import dataclasses
from typing import Callable

from giftflow.application.cqrs import Command, CommandHandler
from giftflow.application.uow import TrackingUnitOfWork
from giftflow.domain import DEFAULT_MAX_STOCK, Gift
from giftflow.kernel.ddd import Repository
from giftflow.kernel.time import Clock
from giftflow.kernel.types import EntityId, IdGenerator, UuidV7Generator


@dataclasses.dataclass(frozen=True)
class CreateGift(Command):
    name: str
    description: str = ""
    quantity: int = 0


@dataclasses.dataclass(frozen=True)
class RestockGift(Command):
    gift_id: EntityId
    amount: int


class CreateGiftHandler(CommandHandler[CreateGift]):
    """Register a new gift; its stock ceiling is ``max_stock``."""

    def __init__(
        self,
        uow_factory: Callable[[], TrackingUnitOfWork],
        gifts: Repository[Gift],
        *,
        max_stock: int = DEFAULT_MAX_STOCK,
        id_generator: IdGenerator | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._uow_factory = uow_factory
        self._gifts = gifts
        self._max_stock = max_stock
        self._ids = id_generator or UuidV7Generator()
        self._clock = clock

    def handle(self, command: CreateGift) -> Gift:
        with self._uow_factory() as uow:
            gift = Gift.create(
                self._ids.generate(),
                command.name,
                command.description,
                command.quantity,
                ceiling=self._max_stock,
                clock=self._clock,
            )
            self._gifts.save(gift)
            uow.track(gift)
        return gift


class RestockGiftHandler(CommandHandler[RestockGift]):
    """Put units back into a gift's stock.

    Raises:
        NotFoundError: no such gift.
        StockCeilingExceededError: the ceiling would be exceeded; nothing changes.
    """

    def __init__(
        self,
        uow_factory: Callable[[], TrackingUnitOfWork],
        gifts: Repository[Gift],
    ) -> None:
        self._uow_factory = uow_factory
        self._gifts = gifts

    def handle(self, command: RestockGift) -> int:
        with self._uow_factory() as uow:
            gift = self._gifts.get_or_raise(command.gift_id)
            gift.increase(command.amount)
            self._gifts.save(gift)
            uow.track(gift)
        return gift.quantity


__all__ = ["CreateGift", "CreateGiftHandler", "RestockGift", "RestockGiftHandler"]
