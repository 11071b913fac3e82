"""Infrastructure errors – the event store or a codec failed."""

from __future__ import annotations

from typing import Any

from giftflow.kernel.errors.base import GiftflowError


class InfrastructureError(GiftflowError):
    """Storage or encoding failed outside the domain."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """An event payload could not be encoded for storage."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class StoreWriteError(InfrastructureError):
    """The event store could not persist a record or a batch.

    ``index`` is the position inside the batch passed to ``append_all`` that
    failed (``0`` for single appends, ``None`` when the failure is not tied to
    one record, e.g. a failed commit).  Nothing from the batch was stored.
    """

    default_code = "store_write_error"

    def __init__(
        self,
        message: str,
        *,
        index: int | None = None,
        aggregate_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        detail = dict(kwargs.pop("detail", None) or {})
        if index is not None:
            detail.setdefault("index", index)
        if aggregate_id is not None:
            detail.setdefault("aggregate_id", aggregate_id)
        super().__init__(message, detail=detail, **kwargs)
        self.index = index
        self.aggregate_id = aggregate_id


__all__ = [
    "InfrastructureError",
    "SerializationError",
    "StoreWriteError",
]
