"""Unit of Work port – transactional boundary."""

from __future__ import annotations

import abc
from typing import Any


class UnitOfWork(abc.ABC):
    """Port: transactional unit of work.

    Used as a context manager: a clean exit commits, an exception rolls back
    and propagates.
    """

    @abc.abstractmethod
    def commit(self) -> None: ...

    @abc.abstractmethod
    def rollback(self) -> None: ...

    def __enter__(self) -> "UnitOfWork":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        if exc_type is None:
            self.commit()
        else:
            self.rollback()


__all__ = ["UnitOfWork"]
