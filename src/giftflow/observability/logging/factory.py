"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from giftflow.observability.logging.filters import SensitiveFieldsFilter

LOG_FORMATS = ("json", "console")


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def _renderer(log_format: str) -> Any:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=False)
    raise ValueError(f"Unknown log format {log_format!r}, expected one of {LOG_FORMATS}")


class JsonLoggerFactory:
    """Route structlog through the stdlib root logger.

    Output is one JSON object per line unless ``log_format="console"`` is
    asked for during local runs.  The redaction filter always runs first,
    so resident contact details never reach a handler.
    """

    @staticmethod
    def configure(
        level: int | str = logging.INFO,
        sensitive_fields: frozenset[str] | None = None,
        *,
        log_format: str = "json",
    ) -> None:
        numeric_level = _resolve_level(level)
        renderer = _renderer(log_format)

        shared_processors: list[Any] = [
            SensitiveFieldsFilter(sensitive_fields),
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
        ]
        structlog.configure(
            processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        final_processors: list[Any] = [structlog.stdlib.ProcessorFormatter.remove_processors_meta]
        if log_format == "json":
            final_processors.append(structlog.processors.format_exc_info)
        final_processors.append(renderer)

        handler = logging.StreamHandler()
        handler.setFormatter(structlog.stdlib.ProcessorFormatter(processors=final_processors))
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(numeric_level)


__all__ = ["LOG_FORMATS", "JsonLoggerFactory"]
