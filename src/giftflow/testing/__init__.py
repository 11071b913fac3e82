"""Testing support – fakes and property-based strategies.

``giftflow.testing.strategies`` needs ``hypothesis`` and is not imported here.
"""

from giftflow.testing.fakes import (
    FailingEventStore,
    FailingSubscriber,
    FakeClock,
    FakeIdGenerator,
    InMemoryRepository,
    RecordingSubscriber,
)

__all__ = [
    "FailingEventStore",
    "FailingSubscriber",
    "FakeClock",
    "FakeIdGenerator",
    "InMemoryRepository",
    "RecordingSubscriber",
]
