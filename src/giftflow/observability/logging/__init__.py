"""Observability – structured logging helpers."""
from giftflow.observability.logging.factory import LOG_FORMATS, JsonLoggerFactory
from giftflow.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from giftflow.observability.logging.processors import event_fields, get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "LOG_FORMATS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "event_fields",
    "get_logger",
]
