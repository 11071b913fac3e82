"""Config – GiftflowSettings."""
from __future__ import annotations

import dataclasses
import logging

from giftflow.config.settings import Settings
from giftflow.config.validation import InvalidSettingValueError
from giftflow.domain.stock import DEFAULT_MAX_STOCK
from giftflow.observability.logging import LOG_FORMATS

EVENT_STORE_BACKENDS = ("memory", "sqlalchemy")


@dataclasses.dataclass
class GiftflowSettings(Settings):
    """Runtime settings, read from ``GIFTFLOW_*`` environment variables.

    ``fail_on_store_error`` selects the publisher policy: ``False`` delivers
    events even when the audit append failed, ``True`` refuses to deliver
    unaudited events.
    """

    _prefix = "GIFTFLOW"

    max_stock: int = DEFAULT_MAX_STOCK
    event_store: str = "memory"
    database_url: str = "sqlite:///:memory:"
    fail_on_store_error: bool = False
    log_level: str = "INFO"
    log_format: str = "json"

    def _validate(self) -> None:
        if self.max_stock <= 0:
            raise InvalidSettingValueError("max_stock", self.max_stock, "must be greater than 0")
        if self.event_store not in EVENT_STORE_BACKENDS:
            raise InvalidSettingValueError(
                "event_store",
                self.event_store,
                f"must be one of {', '.join(EVENT_STORE_BACKENDS)}",
            )
        if self.event_store == "sqlalchemy" and not self.database_url:
            raise InvalidSettingValueError("database_url", self.database_url, "required for the sqlalchemy store")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown log level")
        if self.log_format not in LOG_FORMATS:
            raise InvalidSettingValueError(
                "log_format",
                self.log_format,
                f"must be one of {', '.join(LOG_FORMATS)}",
            )


__all__ = ["EVENT_STORE_BACKENDS", "GiftflowSettings"]
