"""Shared pytest fixtures."""

from __future__ import annotations

import pytest
import structlog

from giftflow.application.event_store import InMemoryEventStore
from giftflow.application.publishing import CommitHook, EventPublisher, SubscriberRegistry
from giftflow.application.uow import InMemoryUnitOfWork
from giftflow.kernel.time import FrozenClock
from giftflow.testing.fakes import FakeClock, FakeIdGenerator


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def fake_clock() -> FrozenClock:
    """FrozenClock pinned to 2026-01-01 12:00 UTC."""
    return FakeClock()


@pytest.fixture
def id_generator() -> FakeIdGenerator:
    return FakeIdGenerator()


@pytest.fixture
def store(fake_clock: FrozenClock) -> InMemoryEventStore:
    return InMemoryEventStore(clock=fake_clock, id_factory=FakeIdGenerator("stored").next_str)


@pytest.fixture
def registry() -> SubscriberRegistry:
    return SubscriberRegistry()


@pytest.fixture
def publisher(store: InMemoryEventStore, registry: SubscriberRegistry) -> EventPublisher:
    return EventPublisher(store, registry)


@pytest.fixture
def commit_hook(publisher: EventPublisher) -> CommitHook:
    return CommitHook(publisher)


@pytest.fixture
def uow_factory(commit_hook: CommitHook):
    def _factory() -> InMemoryUnitOfWork:
        return InMemoryUnitOfWork(commit_hook)

    return _factory
