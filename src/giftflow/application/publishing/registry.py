"""Application publishing – SubscriberRegistry."""
from __future__ import annotations

import abc
import threading
from typing import Callable, Mapping, TypeVar

from giftflow.kernel.ddd import EventRecord
from giftflow.kernel.errors import ApplicationError

Subscriber = Callable[[EventRecord], None]
"""A callable that reacts to one :class:`EventRecord`."""

S = TypeVar("S", bound=Subscriber)


class RegistryFrozenError(ApplicationError):
    """Raised when a subscription is added after :meth:`SubscriberRegistry.freeze`."""

    default_code = "registry_frozen"


class EventSubscriber(abc.ABC):
    """Object-style subscriber declaring the event types it handles.

    Example::

        class AuditTrail(EventSubscriber):
            def subscribed_events(self):
                return {GIFT_ATTRIBUTED: self.on_gift_attributed}
    """

    @abc.abstractmethod
    def subscribed_events(self) -> Mapping[str, Subscriber]:
        """Return ``{event_type: handler}`` for every handled event type."""


class SubscriberRegistry:
    """Maps event types to ordered lists of subscribers.

    Subscribers for one event type are dispatched in registration order.
    Registration is expected at startup; call :meth:`freeze` once the
    application is wired to reject late subscriptions.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[Subscriber]] = {}
        self._lock = threading.Lock()
        self._frozen = False

    def subscribe(self, event_type: str, handler: Subscriber) -> None:
        if not event_type:
            raise ValueError("event_type must not be empty")
        if not callable(handler):
            raise TypeError(f"Subscriber for {event_type!r} is not callable: {handler!r}")
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError(
                    f"Cannot subscribe to {event_type!r}: registry is frozen",
                    detail={"event_type": event_type},
                )
            self._handlers.setdefault(event_type, []).append(handler)

    def on(self, event_type: str) -> Callable[[S], S]:
        """Decorator form of :meth:`subscribe`."""

        def decorator(handler: S) -> S:
            self.subscribe(event_type, handler)
            return handler

        return decorator

    def add_subscriber(self, subscriber: EventSubscriber) -> None:
        for event_type, handler in subscriber.subscribed_events().items():
            self.subscribe(event_type, handler)

    def handlers_for(self, event_type: str) -> tuple[Subscriber, ...]:
        with self._lock:
            return tuple(self._handlers.get(event_type, ()))

    def event_types(self) -> list[str]:
        with self._lock:
            return list(self._handlers)

    def freeze(self) -> SubscriberRegistry:
        with self._lock:
            self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __len__(self) -> int:
        with self._lock:
            return sum(len(handlers) for handlers in self._handlers.values())


__all__ = [
    "EventSubscriber",
    "RegistryFrozenError",
    "Subscriber",
    "SubscriberRegistry",
]
