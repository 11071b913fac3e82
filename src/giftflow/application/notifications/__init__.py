"""Application notifications – ports + in-memory fakes."""
from giftflow.application.notifications.ports import (
    CertificateQueue,
    CertificateRequest,
    InMemoryCertificateQueue,
    InMemoryNotifier,
    Notification,
    Notifier,
)

__all__ = [
    "CertificateQueue",
    "CertificateRequest",
    "InMemoryCertificateQueue",
    "InMemoryNotifier",
    "Notification",
    "Notifier",
]
