"""Application UoW – TrackingUnitOfWork, InMemoryUnitOfWork."""
from __future__ import annotations

import abc

from giftflow.application.publishing import CommitHook
from giftflow.kernel.ddd import EventSource, UnitOfWork


class TrackingUnitOfWork(UnitOfWork, abc.ABC):
    """Unit of work that remembers which aggregates a transaction touched.

    After a successful :meth:`commit` the touched aggregates are handed to the
    :class:`CommitHook` in first-touch order.  :meth:`rollback` and a failed
    commit discard their pending events, so nothing from an abandoned
    transaction is published later.

    Aggregate state is not restored.  Reload an aggregate from its repository
    before using it in another unit of work.
    """

    def __init__(self, commit_hook: CommitHook | None = None) -> None:
        self._commit_hook = commit_hook
        self._touched: list[EventSource] = []
        self._seen: set[int] = set()

    def track(self, *aggregates: EventSource) -> None:
        for aggregate in aggregates:
            if id(aggregate) not in self._seen:
                self._seen.add(id(aggregate))
                self._touched.append(aggregate)

    @property
    def touched(self) -> tuple[EventSource, ...]:
        return tuple(self._touched)

    def commit(self) -> None:
        touched = self._forget()
        try:
            self._commit()
        except BaseException:
            _discard_events(touched)
            raise
        if self._commit_hook is not None:
            self._commit_hook.after_commit(touched)

    def rollback(self) -> None:
        _discard_events(self._forget())
        self._rollback()

    def _forget(self) -> list[EventSource]:
        touched, self._touched, self._seen = self._touched, [], set()
        return touched

    @abc.abstractmethod
    def _commit(self) -> None: ...

    @abc.abstractmethod
    def _rollback(self) -> None: ...


def _discard_events(aggregates: list[EventSource]) -> None:
    for aggregate in aggregates:
        aggregate.pull_domain_events()


class InMemoryUnitOfWork(TrackingUnitOfWork):
    """No-op transaction for tests and in-memory wiring; counts outcomes."""

    def __init__(self, commit_hook: CommitHook | None = None) -> None:
        super().__init__(commit_hook)
        self.commits = 0
        self.rollbacks = 0

    def _commit(self) -> None:
        self.commits += 1

    def _rollback(self) -> None:
        self.rollbacks += 1


__all__ = ["InMemoryUnitOfWork", "TrackingUnitOfWork"]
