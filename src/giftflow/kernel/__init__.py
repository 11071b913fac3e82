"""Kernel – framework-agnostic building blocks."""

from giftflow.kernel.errors import (
    ApplicationError,
    ConflictError,
    DomainError,
    GiftflowError,
    InfrastructureError,
    InvariantViolationError,
    NotFoundError,
    SerializationError,
    StoreWriteError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "ConflictError",
    "DomainError",
    "GiftflowError",
    "InfrastructureError",
    "InvariantViolationError",
    "NotFoundError",
    "SerializationError",
    "StoreWriteError",
    "ValidationError",
]
