"""
giftflow – transactional domain-event pipeline for gift attribution.

Import path convention::

    from giftflow.kernel.ddd import AggregateRoot, EventRecord
    from giftflow.domain import Gift, InsufficientStockError
    from giftflow.application.publishing import CommitHook, EventPublisher
    from giftflow.adapters.sqlalchemy import SQLAlchemyEventStore
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
