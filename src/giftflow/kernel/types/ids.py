"""String-based identifiers and the id-generation port."""

from __future__ import annotations

import dataclasses
from typing import Protocol

import uuid_utils

from giftflow.kernel.errors.domain import ValidationError


def uuid7_str() -> str:
    """Return a new time-ordered UUID v7 in canonical string form."""
    return str(uuid_utils.uuid7())


@dataclasses.dataclass(frozen=True, slots=True)
class EntityId:
    """Entity identifier backed by a non-empty string (UUID v7 when generated).

    Examples::

        eid = EntityId.generate()           # new time-ordered id
        eid = EntityId.from_str("abc-123")  # from existing string
        eid = EntityId("abc-123")           # direct construction
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValidationError(f"{type(self).__name__} must not be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> "EntityId":
        """Return a new random ``EntityId``."""
        return cls(uuid7_str())

    @classmethod
    def from_str(cls, value: str) -> "EntityId":
        """Construct from an existing string identifier."""
        return cls(value)


class IdGenerator(Protocol):
    """Port: produce unique identifiers for new aggregates."""

    def generate(self) -> EntityId: ...


class UuidV7Generator:
    """Time-ordered UUID v7 ids: sortable by creation time, index friendly."""

    def generate(self) -> EntityId:
        return EntityId(uuid7_str())


__all__ = ["EntityId", "IdGenerator", "UuidV7Generator", "uuid7_str"]
