"""Entity base class – equality by kind and id."""

from __future__ import annotations

from giftflow.kernel.types.ids import EntityId


class Entity:
    """Object whose identity outlives its attribute values.

    A ``Gift`` and a ``Resident`` that happen to share an id are different
    entities.
    """

    def __init__(self, id: EntityId) -> None:  # noqa: A002
        self._id = id

    @property
    def id(self) -> EntityId:
        return self._id

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return other._id == self._id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._id))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._id}>"


__all__ = ["Entity"]
