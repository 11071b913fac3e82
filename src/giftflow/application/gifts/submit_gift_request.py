"""Application gifts – SubmitGiftRequest command and handler."""
from __future__ import annotations

import dataclasses
from typing import Callable

from giftflow.application.cqrs import Command, CommandHandler
from giftflow.application.uow import TrackingUnitOfWork
from giftflow.domain import GiftRequest
from giftflow.kernel.ddd import Repository
from giftflow.kernel.time import Clock, SystemClock
from giftflow.kernel.types import EntityId, IdGenerator, UuidV7Generator


@dataclasses.dataclass(frozen=True)
class SubmitGiftRequest(Command):
    requester_name: str
    requester_email: str
    requester_phone: str
    requested_gift: str
    motivation: str


class SubmitGiftRequestHandler(CommandHandler[SubmitGiftRequest]):
    """Validate and store a new gift request; returns its id."""

    def __init__(
        self,
        uow_factory: Callable[[], TrackingUnitOfWork],
        requests: Repository[GiftRequest],
        *,
        id_generator: IdGenerator | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._uow_factory = uow_factory
        self._requests = requests
        self._ids = id_generator or UuidV7Generator()
        self._clock = clock or SystemClock()

    def handle(self, command: SubmitGiftRequest) -> EntityId:
        with self._uow_factory() as uow:
            request = GiftRequest.submit(
                self._ids.generate(),
                requester_name=command.requester_name,
                requester_email=command.requester_email,
                requester_phone=command.requester_phone,
                requested_gift=command.requested_gift,
                motivation=command.motivation,
                clock=self._clock,
            )
            self._requests.save(request)
            uow.track(request)
        return request.id


__all__ = ["SubmitGiftRequest", "SubmitGiftRequestHandler"]
