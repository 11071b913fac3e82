"""Testing fakes – in-memory doubles for kernel and application ports."""
from giftflow.application.notifications import InMemoryCertificateQueue, InMemoryNotifier
from giftflow.kernel.time import FrozenClock
from giftflow.testing.fakes.clock import FAKE_NOW, FakeClock
from giftflow.testing.fakes.event_store import FailingEventStore
from giftflow.testing.fakes.ids import FakeIdGenerator
from giftflow.testing.fakes.repository import InMemoryRepository
from giftflow.testing.fakes.subscribers import FailingSubscriber, RecordingSubscriber

__all__ = [
    "FAKE_NOW",
    "FailingEventStore",
    "FailingSubscriber",
    "FakeClock",
    "FakeIdGenerator",
    "FrozenClock",
    "InMemoryCertificateQueue",
    "InMemoryNotifier",
    "InMemoryRepository",
    "RecordingSubscriber",
]
