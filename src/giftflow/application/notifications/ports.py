"""Application notifications – confirmation and certificate ports."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class Notification:
    """An outbound confirmation message."""

    to: str
    subject: str
    body: str


@dataclass(frozen=True)
class CertificateRequest:
    """Ask for a gift certificate to be generated and mailed later."""

    attribution_id: str
    resident_name: str
    resident_email: str
    gift_name: str
    attributed_at: str


@runtime_checkable
class Notifier(Protocol):
    """Port: deliver a notification immediately."""

    def send(self, notification: Notification) -> None: ...


@runtime_checkable
class CertificateQueue(Protocol):
    """Port: hand certificate generation to a background worker."""

    def enqueue(self, request: CertificateRequest) -> None: ...


class InMemoryNotifier:
    """Fake Notifier that captures sent notifications in memory."""

    def __init__(self) -> None:
        self.sent: list[Notification] = []

    def send(self, notification: Notification) -> None:
        self.sent.append(notification)

    @property
    def count(self) -> int:
        return len(self.sent)

    def last(self) -> Notification | None:
        return self.sent[-1] if self.sent else None


class InMemoryCertificateQueue:
    """Fake CertificateQueue; queued requests stay in :attr:`queued`."""

    def __init__(self) -> None:
        self.queued: list[CertificateRequest] = []

    def enqueue(self, request: CertificateRequest) -> None:
        self.queued.append(request)


__all__ = [
    "CertificateQueue",
    "CertificateRequest",
    "InMemoryCertificateQueue",
    "InMemoryNotifier",
    "Notification",
    "Notifier",
]
