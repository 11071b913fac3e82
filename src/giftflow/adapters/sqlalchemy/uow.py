"""SQLAlchemy adapter – SqlAlchemyUnitOfWork."""
from __future__ import annotations

from typing import Any, Callable

from sqlalchemy.orm import Session

from giftflow.application.publishing import CommitHook
from giftflow.application.uow import TrackingUnitOfWork


class SqlAlchemyUnitOfWork(TrackingUnitOfWork):
    """SQLAlchemy unit of work; fires the commit hook after ``session.commit()``.

    Repositories write through :attr:`session`.  If the commit itself raises,
    the tracked aggregates are forgotten and nothing is published.
    """

    def __init__(
        self,
        session_factory: Callable[[], Session],
        commit_hook: CommitHook | None = None,
    ) -> None:
        super().__init__(commit_hook)
        self._factory = session_factory
        self.session: Session | None = None

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        self.session = self._factory()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        try:
            super().__exit__(exc_type, exc_val, exc_tb)
        finally:
            if self.session is not None:
                self.session.close()
                self.session = None

    def _commit(self) -> None:
        self._require_session().commit()

    def _rollback(self) -> None:
        self._require_session().rollback()

    def _require_session(self) -> Session:
        if self.session is None:
            raise RuntimeError("SqlAlchemyUnitOfWork used outside its 'with' block")
        return self.session


__all__ = ["SqlAlchemyUnitOfWork"]
