"""GiftRequest aggregate – a resident asking for a gift."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from giftflow.domain.events import (
    GIFT_REQUEST_APPROVED,
    GIFT_REQUEST_REJECTED,
    gift_request_decided,
    gift_request_submitted,
)
from giftflow.kernel.ddd import AggregateRoot
from giftflow.kernel.errors import ConflictError, ValidationError
from giftflow.kernel.time import Clock, SystemClock
from giftflow.kernel.types import Email, EntityId


class GiftRequestStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class GiftRequest(AggregateRoot):
    """A submitted request; starts ``PENDING`` and is decided exactly once."""

    def __init__(
        self,
        id: EntityId,  # noqa: A002
        requester_name: str,
        requester_email: Email,
        requester_phone: str,
        requested_gift: str,
        motivation: str,
        submitted_at: datetime,
        *,
        status: GiftRequestStatus = GiftRequestStatus.PENDING,
        clock: Clock | None = None,
    ) -> None:
        super().__init__(id)
        self._requester_name = requester_name
        self._requester_email = requester_email
        self._requester_phone = requester_phone
        self._requested_gift = requested_gift
        self._motivation = motivation
        self._submitted_at = submitted_at
        self._status = status
        self._clock = clock or SystemClock()

    @classmethod
    def submit(
        cls,
        id: EntityId,  # noqa: A002
        requester_name: str,
        requester_email: str,
        requester_phone: str,
        requested_gift: str,
        motivation: str,
        *,
        clock: Clock | None = None,
    ) -> "GiftRequest":
        violations = {
            field: "must not be empty"
            for field, value in (
                ("requester_name", requester_name),
                ("requested_gift", requested_gift),
                ("motivation", motivation),
            )
            if not value.strip()
        }
        if violations:
            raise ValidationError("invalid gift request", violations=violations)
        email = Email(requester_email)

        clock = clock or SystemClock()
        request = cls(
            id,
            requester_name.strip(),
            email,
            requester_phone.strip(),
            requested_gift.strip(),
            motivation.strip(),
            clock.now(),
            clock=clock,
        )
        request.record_that(
            gift_request_submitted(
                gift_request_id=str(id),
                requester_name=request.requester_name,
                requester_email=str(email),
                requested_gift=request.requested_gift,
                submitted_at=request.submitted_at,
            )
        )
        return request

    @property
    def requester_name(self) -> str:
        return self._requester_name

    @property
    def requester_email(self) -> Email:
        return self._requester_email

    @property
    def requester_phone(self) -> str:
        return self._requester_phone

    @property
    def requested_gift(self) -> str:
        return self._requested_gift

    @property
    def motivation(self) -> str:
        return self._motivation

    @property
    def submitted_at(self) -> datetime:
        return self._submitted_at

    @property
    def status(self) -> GiftRequestStatus:
        return self._status

    def is_pending(self) -> bool:
        return self._status is GiftRequestStatus.PENDING

    def approve(self) -> None:
        self._decide(GiftRequestStatus.APPROVED, GIFT_REQUEST_APPROVED)

    def reject(self) -> None:
        self._decide(GiftRequestStatus.REJECTED, GIFT_REQUEST_REJECTED)

    def _decide(self, status: GiftRequestStatus, event_type: str) -> None:
        if not self.is_pending():
            raise ConflictError(
                f"gift request is already {self._status.value}",
                current_state=self._status.value,
                detail={"gift_request_id": str(self.id)},
            )
        self._status = status
        self.record_that(gift_request_decided(event_type, str(self.id), self._clock.now()))


__all__ = ["GiftRequest", "GiftRequestStatus"]
