"""Application publishing – EventPublisher.

Stores a batch of :class:`~giftflow.kernel.ddd.EventRecord` in the audit log,
then fans each record out to its subscribers.  A store failure never blocks
delivery (unless ``fail_on_store_error`` is set) and a failing subscriber
never blocks its siblings or later records.
"""
from __future__ import annotations

from typing import Any, Iterable, Protocol, runtime_checkable

from giftflow.application.event_store import EventStore
from giftflow.application.publishing.registry import Subscriber, SubscriberRegistry
from giftflow.kernel.ddd import EventRecord
from giftflow.kernel.errors import GiftflowError, StoreWriteError
from giftflow.observability.logging import event_fields, get_logger


@runtime_checkable
class DomainEventPublisher(Protocol):
    """Anything that can take a drained batch of events."""

    def publish(self, events: Iterable[EventRecord]) -> None: ...


def _subscriber_name(handler: Subscriber) -> str:
    name = getattr(handler, "__qualname__", None) or type(handler).__qualname__
    module = getattr(handler, "__module__", None)
    return f"{module}.{name}" if module else name


class EventPublisher:
    """Append-then-dispatch publisher.

    Parameters
    ----------
    store:
        The audit log every batch is appended to.
    registry:
        Source of subscribers, looked up per event type at dispatch time.
    fail_on_store_error:
        When ``True`` a failed append is re-raised as :class:`StoreWriteError`
        and nothing is dispatched.  The default logs the failure and still
        delivers.
    """

    def __init__(
        self,
        store: EventStore,
        registry: SubscriberRegistry,
        *,
        fail_on_store_error: bool = False,
        logger: Any = None,
    ) -> None:
        self._store = store
        self._registry = registry
        self._fail_on_store_error = fail_on_store_error
        self._log = logger or get_logger(__name__)

    @property
    def fail_on_store_error(self) -> bool:
        return self._fail_on_store_error

    def publish(self, events: Iterable[EventRecord]) -> None:
        batch = list(events)
        if not batch:
            return

        self._append(batch)

        failures = 0
        for event in batch:
            failures += self._dispatch(event)
        self._log.debug(
            "events.published",
            event_count=len(batch),
            subscriber_failures=failures,
        )

    def publish_one(self, event: EventRecord) -> None:
        self.publish([event])

    def _append(self, batch: list[EventRecord]) -> None:
        try:
            self._store.append_all(batch)
        except Exception as exc:  # noqa: BLE001
            fields = exc.log_fields() if isinstance(exc, GiftflowError) else {}
            self._log.error(
                "event_store.append_failed",
                event_count=len(batch),
                failed_index=getattr(exc, "index", None),
                error=str(exc),
                exc_info=True,
                **fields,
            )
            if not self._fail_on_store_error:
                return
            if isinstance(exc, StoreWriteError):
                raise
            raise StoreWriteError(f"Event store append failed: {exc}", cause=exc) from exc

    def _dispatch(self, event: EventRecord) -> int:
        failures = 0
        for handler in self._registry.handlers_for(event.event_type):
            try:
                handler(event)
            except Exception as exc:  # noqa: BLE001
                failures += 1
                self._log.error(
                    "subscriber.failed",
                    subscriber=_subscriber_name(handler),
                    error=str(exc),
                    exc_info=True,
                    **event_fields(event),
                )
        return failures


__all__ = ["DomainEventPublisher", "EventPublisher"]
