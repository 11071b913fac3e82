"""SQLAlchemy adapter – event store, session factory, unit of work."""
from giftflow.adapters.sqlalchemy.event_store import SQLAlchemyEventStore, event_store_table
from giftflow.adapters.sqlalchemy.session import SqlAlchemySessionFactory
from giftflow.adapters.sqlalchemy.uow import SqlAlchemyUnitOfWork

__all__ = [
    "SQLAlchemyEventStore",
    "SqlAlchemySessionFactory",
    "SqlAlchemyUnitOfWork",
    "event_store_table",
]
