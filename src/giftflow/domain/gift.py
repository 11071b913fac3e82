"""Gift aggregate – the stock-bearing entity."""

from __future__ import annotations

import threading

from giftflow.domain.events import stock_changed
from giftflow.domain.stock import (
    DEFAULT_MAX_STOCK,
    InsufficientStockError,
    StockCeilingExceededError,
    StockQuantity,
)
from giftflow.kernel.ddd import AggregateRoot
from giftflow.kernel.errors import ValidationError
from giftflow.kernel.time import Clock, SystemClock
from giftflow.kernel.types import EntityId

_NAME_MIN = 3
_NAME_MAX = 100


class Gift(AggregateRoot):
    """A gift with a bounded stock.

    Every successful :meth:`decrease` / :meth:`increase` records one
    ``StockChanged`` event.  The check, the mutation and the recording run
    under the instance lock, so two callers sharing this instance can never
    interleave between the check and the write.  Races between separate
    transactions are left to the persistence layer.
    """

    def __init__(
        self,
        id: EntityId,  # noqa: A002
        name: str,
        description: str,
        stock: StockQuantity,
        *,
        clock: Clock | None = None,
    ) -> None:
        super().__init__(id)
        self._name = name
        self._description = description
        self._stock = stock
        self._clock = clock or SystemClock()
        self._lock = threading.RLock()

    @classmethod
    def create(
        cls,
        id: EntityId,  # noqa: A002
        name: str,
        description: str = "",
        quantity: int = 0,
        *,
        ceiling: int = DEFAULT_MAX_STOCK,
        clock: Clock | None = None,
    ) -> "Gift":
        name = name.strip()
        if not name:
            raise ValidationError("gift name cannot be empty")
        if not _NAME_MIN <= len(name) <= _NAME_MAX:
            raise ValidationError(
                f"gift name must be between {_NAME_MIN} and {_NAME_MAX} characters",
                violations={"name": f"length {len(name)} outside {_NAME_MIN}..{_NAME_MAX}"},
            )
        return cls(id, name, description.strip(), StockQuantity(quantity, ceiling), clock=clock)

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def stock(self) -> StockQuantity:
        return self._stock

    @property
    def quantity(self) -> int:
        return self._stock.value

    @property
    def ceiling(self) -> int:
        return self._stock.ceiling

    def is_in_stock(self) -> bool:
        return not self._stock.is_empty

    def is_available(self, requested: int) -> bool:
        return self._stock.can_supply(requested)

    def can_be_attributed(self) -> bool:
        """A gift can be attributed while at least one unit is left."""
        return self.is_in_stock()

    def decrease(self, amount: int = 1) -> None:
        """Take *amount* units out of stock.

        Raises:
            InsufficientStockError: fewer than *amount* units are left.
        """
        with self._lock:
            try:
                updated = self._stock.decrease(amount)
            except InsufficientStockError as exc:
                exc.detail.update(gift_id=str(self.id), gift_name=self._name)
                raise
            self._apply(updated)

    def increase(self, amount: int) -> None:
        """Put *amount* units back into stock.

        Raises:
            StockCeilingExceededError: the ceiling would be exceeded.
        """
        with self._lock:
            try:
                updated = self._stock.increase(amount)
            except StockCeilingExceededError as exc:
                exc.detail.update(gift_id=str(self.id), gift_name=self._name)
                raise
            self._apply(updated)

    def _apply(self, updated: StockQuantity) -> None:
        previous = self._stock
        self._stock = updated
        self.record_that(
            stock_changed(
                gift_id=str(self.id),
                gift_name=self._name,
                previous_quantity=previous.value,
                quantity=updated.value,
                occurred_at=self._clock.now(),
            )
        )


__all__ = ["Gift"]
