"""StockQuantity – the guarded ``0 <= quantity <= ceiling`` invariant."""

from __future__ import annotations

import dataclasses
from typing import Any, Final

from giftflow.kernel.ddd import ensure, ensure_within
from giftflow.kernel.errors import InvariantViolationError, ValidationError

DEFAULT_MAX_STOCK: Final = 1000


class InsufficientStockError(InvariantViolationError):
    """Taking *requested* units would drive the stock below zero."""

    default_code = "insufficient_stock"

    def __init__(self, requested: int, available: int, **kwargs: Any) -> None:
        super().__init__(
            f"Insufficient stock: requested {requested}, available {available}",
            detail={"requested": requested, "available": available},
            **kwargs,
        )
        self.requested = requested
        self.available = available


class StockCeilingExceededError(InvariantViolationError):
    """Adding *requested* units would push the stock above its ceiling."""

    default_code = "stock_ceiling_exceeded"

    def __init__(self, requested: int, current: int, ceiling: int, **kwargs: Any) -> None:
        super().__init__(
            f"Stock ceiling exceeded: {current} + {requested} > {ceiling}",
            detail={"requested": requested, "current": current, "ceiling": ceiling},
            **kwargs,
        )
        self.requested = requested
        self.current = current
        self.ceiling = ceiling


def _require_positive(amount: int) -> None:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValidationError(f"amount must be an integer, got {amount!r}")
    if amount <= 0:
        raise ValidationError(f"amount must be positive, got {amount}")


@dataclasses.dataclass(frozen=True, slots=True)
class StockQuantity:
    """Immutable stock level bounded by ``[0, ceiling]``.

    :meth:`decrease` and :meth:`increase` validate first and return a new
    value; on violation they raise and the original value is untouched.
    """

    value: int
    ceiling: int = DEFAULT_MAX_STOCK

    def __post_init__(self) -> None:
        ensure(self.ceiling > 0, "stock ceiling must be positive", ceiling=self.ceiling)
        ensure_within(self.value, 0, self.ceiling, name="stock quantity")

    def __int__(self) -> int:
        return self.value

    @property
    def is_empty(self) -> bool:
        return self.value == 0

    def can_supply(self, requested: int) -> bool:
        return self.value >= requested

    def decrease(self, amount: int = 1) -> "StockQuantity":
        _require_positive(amount)
        if self.value < amount:
            raise InsufficientStockError(amount, self.value)
        return dataclasses.replace(self, value=self.value - amount)

    def increase(self, amount: int) -> "StockQuantity":
        _require_positive(amount)
        if self.value + amount > self.ceiling:
            raise StockCeilingExceededError(amount, self.value, self.ceiling)
        return dataclasses.replace(self, value=self.value + amount)


__all__ = [
    "DEFAULT_MAX_STOCK",
    "InsufficientStockError",
    "StockCeilingExceededError",
    "StockQuantity",
]
