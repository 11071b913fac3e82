"""SQLAlchemy adapter – SQLAlchemyEventStore."""
from __future__ import annotations

import json
import threading
from contextlib import AbstractContextManager, nullcontext
from datetime import UTC, datetime
from typing import Any, Callable, Sequence

from sqlalchemy import (
    Column,
    DateTime,
    Engine,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    func,
    insert,
    select,
)
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from giftflow.application.event_store import (
    AggregateLocks,
    EventStore,
    StoredEventRecord,
    ensure_records,
    next_sequences,
)
from giftflow.kernel.ddd import EventRecord
from giftflow.kernel.errors import SerializationError, StoreWriteError
from giftflow.kernel.time import Clock, SystemClock
from giftflow.kernel.types import uuid7_str
from giftflow.observability.logging import get_logger

metadata = MetaData()

event_store_table = Table(
    "event_store",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("store_id", String(36), nullable=False, unique=True),
    Column("event_type", String(255), nullable=False, index=True),
    Column("aggregate_id", String(255), nullable=False, index=True),
    Column("sequence", Integer, nullable=False),
    Column("payload_json", Text, nullable=False),
    Column("occurred_at", DateTime(timezone=True), nullable=False),
    Column("recorded_at", DateTime(timezone=True), nullable=False),
    UniqueConstraint("aggregate_id", "sequence", name="uq_event_store_aggregate_sequence"),
)


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


def _bound_engine(session_factory: Callable[[], Session]) -> Engine | None:
    engine = getattr(session_factory, "engine", None)
    if engine is None:
        engine = getattr(session_factory, "kw", {}).get("bind")
    return engine if isinstance(engine, Engine) else None


def _shares_one_connection(engine: Engine | None) -> bool:
    """True when every session of ``engine`` runs on the same DBAPI connection."""
    if engine is None:
        return False
    if isinstance(engine.pool, StaticPool):
        return True
    url = engine.url
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


class SQLAlchemyEventStore(EventStore):
    """Append-only SQLAlchemy event store.

    Every record lives in the single ``event_store`` table.  The
    ``(aggregate_id, sequence)`` pair is declared ``UNIQUE`` so the database
    rejects a duplicate sequence even when two processes race on the same
    aggregate; inside one process appends are serialised per aggregate.
    When the engine hands every session the same connection (``StaticPool``,
    in-memory SQLite) all reads and writes of the store are serialised as
    well, since two transactions cannot interleave on one connection.

    Each :meth:`append_all` call runs in its own transaction: either every
    row of the batch is committed or none is.

    The store **does not** migrate the table automatically.  Call
    :meth:`create_table` once before using it.

    Parameters
    ----------
    session_factory:
        Zero-argument callable returning a fresh :class:`~sqlalchemy.orm.Session`
        (a :class:`~sqlalchemy.orm.sessionmaker` or
        :class:`~giftflow.adapters.sqlalchemy.SqlAlchemySessionFactory`).
    """

    TABLE_NAME = "event_store"

    def __init__(
        self,
        session_factory: Callable[[], Session],
        *,
        clock: Clock | None = None,
        id_factory: Callable[[], str] = uuid7_str,
    ) -> None:
        self._session_factory = session_factory
        self._clock = clock or SystemClock()
        self._id_factory = id_factory
        self._locks = AggregateLocks()
        self._connection_lock: threading.Lock | None = (
            threading.Lock() if _shares_one_connection(_bound_engine(session_factory)) else None
        )
        self._log = get_logger(__name__)

    # ------------------------------------------------------------------
    # Schema helpers
    # ------------------------------------------------------------------

    @classmethod
    def create_table(cls, bind: Engine) -> None:
        """Create the ``event_store`` table if it does not exist."""
        metadata.create_all(bind, tables=[event_store_table])

    # ------------------------------------------------------------------
    # EventStore interface
    # ------------------------------------------------------------------

    def append_all(self, events: Sequence[EventRecord]) -> list[StoredEventRecord]:
        batch = ensure_records(events)
        if not batch:
            return []
        payloads = [self._encode(index, event) for index, event in enumerate(batch)]

        with self._locks.hold(event.aggregate_id for event in batch), self._exclusive():
            session = self._session_factory()
            try:
                with session.begin():
                    stored = self._insert_batch(session, batch, payloads)
            except StoreWriteError:
                raise
            except SQLAlchemyError as exc:
                raise StoreWriteError(f"Event store commit failed: {exc}", cause=exc) from exc
            finally:
                session.close()

        self._log.debug("event_store.appended", event_count=len(stored))
        return stored

    def find_by_aggregate(self, aggregate_id: str) -> list[StoredEventRecord]:
        t = event_store_table
        stmt = select(t).where(t.c.aggregate_id == aggregate_id).order_by(t.c.sequence)
        return self._fetch(stmt)

    def find_by_type(self, event_type: str) -> list[StoredEventRecord]:
        t = event_store_table
        stmt = select(t).where(t.c.event_type == event_type).order_by(t.c.id)
        return self._fetch(stmt)

    def find_all(self) -> list[StoredEventRecord]:
        return self._fetch(select(event_store_table).order_by(event_store_table.c.id))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _exclusive(self) -> AbstractContextManager[Any]:
        return self._connection_lock if self._connection_lock is not None else nullcontext()

    def _encode(self, index: int, event: EventRecord) -> str:
        try:
            return json.dumps(dict(event.payload))
        except (TypeError, ValueError) as exc:
            cause = SerializationError(
                f"Payload of {event.event_type!r} is not JSON serialisable: {exc}",
                payload_type=event.event_type,
                cause=exc,
            )
            raise StoreWriteError(
                f"Cannot store {event.event_type!r} at index {index}: payload is not JSON serialisable",
                index=index,
                aggregate_id=event.aggregate_id,
                cause=cause,
            ) from cause

    def _insert_batch(
        self,
        session: Session,
        batch: list[EventRecord],
        payloads: list[str],
    ) -> list[StoredEventRecord]:
        t = event_store_table
        aggregate_ids = {event.aggregate_id for event in batch}
        rows = session.execute(
            select(t.c.aggregate_id, func.max(t.c.sequence))
            .where(t.c.aggregate_id.in_(aggregate_ids))
            .group_by(t.c.aggregate_id)
        ).all()
        last = {aggregate_id: sequence for aggregate_id, sequence in rows}

        recorded_at = self._clock.now().astimezone(UTC)
        stored: list[StoredEventRecord] = []
        for index, (event, sequence, payload_json) in enumerate(
            zip(batch, next_sequences(batch, last), payloads)
        ):
            record = StoredEventRecord(
                event=event,
                store_id=self._id_factory(),
                sequence=sequence,
                recorded_at=recorded_at,
            )
            try:
                session.execute(
                    insert(t).values(
                        store_id=record.store_id,
                        event_type=event.event_type,
                        aggregate_id=event.aggregate_id,
                        sequence=sequence,
                        payload_json=payload_json,
                        occurred_at=event.occurred_at,
                        recorded_at=recorded_at,
                    )
                )
            except SQLAlchemyError as exc:
                raise StoreWriteError(
                    f"Cannot store {event.event_type!r} at index {index}: {exc}",
                    index=index,
                    aggregate_id=event.aggregate_id,
                    cause=exc,
                ) from exc
            stored.append(record)
        return stored

    def _fetch(self, stmt: Any) -> list[StoredEventRecord]:
        with self._exclusive(), self._session_factory() as session:
            rows = session.execute(stmt).all()
        return [self._to_record(row) for row in rows]

    @staticmethod
    def _to_record(row: Any) -> StoredEventRecord:
        event = EventRecord(
            event_type=row.event_type,
            aggregate_id=row.aggregate_id,
            payload=json.loads(row.payload_json),
            occurred_at=_as_utc(row.occurred_at),
        )
        return StoredEventRecord(
            event=event,
            store_id=row.store_id,
            sequence=row.sequence,
            recorded_at=_as_utc(row.recorded_at),
        )


__all__ = ["SQLAlchemyEventStore", "event_store_table", "metadata"]
