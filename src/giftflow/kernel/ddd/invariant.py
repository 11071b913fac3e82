"""Guards that turn a broken domain rule into ``InvariantViolationError``."""

from __future__ import annotations

from typing import Any

from giftflow.kernel.errors.domain import InvariantViolationError


def ensure(condition: bool, message: str, **detail: Any) -> None:
    """Raise ``InvariantViolationError`` carrying *detail* when *condition* is false."""
    if not condition:
        raise InvariantViolationError(message, detail=detail)


def ensure_within(value: int, low: int, high: int, *, name: str) -> int:
    """Return *value* if ``low <= value <= high``.

    The error detail names the bounds so the log line is enough to see
    which side was crossed.
    """
    ensure(
        low <= value <= high,
        f"{name} must be within [{low}, {high}], got {value}",
        field=name,
        value=value,
        low=low,
        high=high,
    )
    return value


__all__ = ["ensure", "ensure_within"]
