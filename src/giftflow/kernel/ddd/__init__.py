"""DDD building blocks – public re-export surface."""

from giftflow.kernel.ddd.aggregate import AggregateRoot, EventSource
from giftflow.kernel.ddd.domain_event import EventRecord
from giftflow.kernel.ddd.entity import Entity
from giftflow.kernel.ddd.event_collector import EventCollector
from giftflow.kernel.ddd.invariant import ensure, ensure_within
from giftflow.kernel.ddd.repository import Repository
from giftflow.kernel.ddd.unit_of_work import UnitOfWork

__all__ = [
    "AggregateRoot",
    "Entity",
    "EventCollector",
    "EventRecord",
    "EventSource",
    "Repository",
    "UnitOfWork",
    "ensure",
    "ensure_within",
]
