"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    GiftflowError
    ├── DomainError          (domain.py)
    │   ├── InvariantViolationError
    │   ├── ValidationError
    │   ├── NotFoundError
    │   └── ConflictError
    ├── ApplicationError     (application.py)
    └── InfrastructureError  (infrastructure.py)
        ├── SerializationError
        └── StoreWriteError
"""

from giftflow.kernel.errors.application import ApplicationError
from giftflow.kernel.errors.base import GiftflowError
from giftflow.kernel.errors.domain import (
    ConflictError,
    DomainError,
    InvariantViolationError,
    NotFoundError,
    ValidationError,
)
from giftflow.kernel.errors.infrastructure import (
    InfrastructureError,
    SerializationError,
    StoreWriteError,
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
