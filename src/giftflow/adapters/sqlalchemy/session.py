"""SQLAlchemy adapter – SqlAlchemySessionFactory."""
from __future__ import annotations

from typing import Any

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool


class SqlAlchemySessionFactory:
    """Creates SQLAlchemy sessions from an engine URL.

    An in-memory SQLite URL gets a single shared connection so every session
    sees the same database.
    """

    def __init__(self, database_url: str, **engine_kwargs: Any) -> None:
        if _is_sqlite_memory(database_url):
            engine_kwargs.setdefault("poolclass", StaticPool)
            engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
        self._engine = create_engine(database_url, **engine_kwargs)
        self._session_factory = sessionmaker(self._engine, expire_on_commit=False)

    @property
    def engine(self) -> Engine:
        return self._engine

    def __call__(self) -> Session:
        return self._session_factory()

    def dispose(self) -> None:
        self._engine.dispose()


def _is_sqlite_memory(database_url: str) -> bool:
    return database_url in ("sqlite://", "sqlite:///:memory:") or (
        database_url.startswith("sqlite") and "mode=memory" in database_url
    )


__all__ = ["SqlAlchemySessionFactory"]
