"""Observability – get_logger and log-field helpers."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from giftflow.kernel.ddd import EventRecord


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger, bound to *initial_values* when any are given."""
    logger = structlog.get_logger(name)
    return logger.bind(**initial_values) if initial_values else logger


def event_fields(event: EventRecord) -> dict[str, Any]:
    """Fields that identify *event* on every log line about it."""
    return {"event_type": event.event_type, "aggregate_id": event.aggregate_id}


__all__ = ["event_fields", "get_logger"]
