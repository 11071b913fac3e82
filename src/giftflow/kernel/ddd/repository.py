"""Repository port – generic repository for aggregate roots."""

from __future__ import annotations

import abc
from typing import Generic, TypeVar

from giftflow.kernel.ddd.entity import Entity
from giftflow.kernel.errors import NotFoundError
from giftflow.kernel.types.ids import EntityId

TEntity = TypeVar("TEntity", bound=Entity)


class Repository(abc.ABC, Generic[TEntity]):
    """Port: load and save one kind of entity.

    Concrete implementations live in the adapter layer (or in
    ``giftflow.testing.fakes`` for tests).
    """

    resource_name: str = "Entity"

    @abc.abstractmethod
    def get(self, id: EntityId) -> TEntity | None: ...  # noqa: A002

    @abc.abstractmethod
    def save(self, entity: TEntity) -> None: ...

    def get_or_raise(self, id: EntityId) -> TEntity:  # noqa: A002
        found = self.get(id)
        if found is None:
            raise NotFoundError(self.resource_name, id.value)
        return found


__all__ = ["Repository"]
