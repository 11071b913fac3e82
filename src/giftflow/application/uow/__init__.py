"""Application – unit-of-work implementations that fire the commit hook."""
from giftflow.application.uow.tracking import InMemoryUnitOfWork, TrackingUnitOfWork

__all__ = ["InMemoryUnitOfWork", "TrackingUnitOfWork"]
