"""Bootstrap – wire the event pipeline from :class:`GiftflowSettings`."""
from __future__ import annotations

import dataclasses
from typing import Callable

from giftflow.adapters.sqlalchemy import (
    SQLAlchemyEventStore,
    SqlAlchemySessionFactory,
    SqlAlchemyUnitOfWork,
)
from giftflow.application.event_store import EventStore, InMemoryEventStore
from giftflow.application.publishing import CommitHook, EventPublisher, SubscriberRegistry
from giftflow.application.uow import InMemoryUnitOfWork, TrackingUnitOfWork
from giftflow.config import GiftflowSettings
from giftflow.kernel.time import Clock
from giftflow.observability.logging import JsonLoggerFactory


@dataclasses.dataclass
class Pipeline:
    """The wired publishing pipeline.

    ``unit_of_work()`` returns a fresh unit of work whose successful commit
    publishes every tracked aggregate's events.
    """

    settings: GiftflowSettings
    store: EventStore
    registry: SubscriberRegistry
    publisher: EventPublisher
    commit_hook: CommitHook
    uow_factory: Callable[[], TrackingUnitOfWork]
    session_factory: SqlAlchemySessionFactory | None = None

    def unit_of_work(self) -> TrackingUnitOfWork:
        return self.uow_factory()

    def close(self) -> None:
        if self.session_factory is not None:
            self.session_factory.dispose()


def configure_logging(settings: GiftflowSettings) -> None:
    JsonLoggerFactory.configure(level=settings.log_level, log_format=settings.log_format)


def build_pipeline(
    settings: GiftflowSettings | None = None,
    registry: SubscriberRegistry | None = None,
    *,
    clock: Clock | None = None,
) -> Pipeline:
    """Build store, publisher, commit hook and unit-of-work factory.

    The registry is frozen once the pipeline is built.
    """
    settings = settings or GiftflowSettings()
    registry = registry or SubscriberRegistry()

    session_factory: SqlAlchemySessionFactory | None = None
    store: EventStore
    if settings.event_store == "sqlalchemy":
        session_factory = SqlAlchemySessionFactory(settings.database_url)
        SQLAlchemyEventStore.create_table(session_factory.engine)
        store = SQLAlchemyEventStore(session_factory, clock=clock)
    else:
        store = InMemoryEventStore(clock=clock)

    publisher = EventPublisher(
        store,
        registry.freeze(),
        fail_on_store_error=settings.fail_on_store_error,
    )
    hook = CommitHook(publisher)

    uow_factory: Callable[[], TrackingUnitOfWork]
    if session_factory is not None:
        sessions = session_factory

        def uow_factory() -> TrackingUnitOfWork:
            return SqlAlchemyUnitOfWork(sessions, hook)
    else:

        def uow_factory() -> TrackingUnitOfWork:
            return InMemoryUnitOfWork(hook)

    return Pipeline(
        settings=settings,
        store=store,
        registry=registry,
        publisher=publisher,
        commit_hook=hook,
        uow_factory=uow_factory,
        session_factory=session_factory,
    )


__all__ = ["Pipeline", "build_pipeline", "configure_logging"]
