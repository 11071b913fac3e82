"""Application – domain event publishing pipeline."""
from giftflow.application.publishing.commit_hook import CommitHook
from giftflow.application.publishing.publisher import DomainEventPublisher, EventPublisher
from giftflow.application.publishing.registry import (
    EventSubscriber,
    RegistryFrozenError,
    Subscriber,
    SubscriberRegistry,
)

__all__ = [
    "CommitHook",
    "DomainEventPublisher",
    "EventPublisher",
    "EventSubscriber",
    "RegistryFrozenError",
    "Subscriber",
    "SubscriberRegistry",
]
