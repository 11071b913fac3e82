"""Resident entity – the person a gift is attributed to."""

from __future__ import annotations

from giftflow.kernel.ddd import Entity
from giftflow.kernel.errors import ValidationError
from giftflow.kernel.types import Email, EntityId


class Resident(Entity):
    def __init__(
        self,
        id: EntityId,  # noqa: A002
        first_name: str,
        last_name: str,
        email: Email,
    ) -> None:
        super().__init__(id)
        if not first_name.strip():
            raise ValidationError("first name cannot be empty")
        if not last_name.strip():
            raise ValidationError("last name cannot be empty")
        self._first_name = first_name.strip()
        self._last_name = last_name.strip()
        self._email = email

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def full_name(self) -> str:
        return f"{self._first_name} {self._last_name}"

    @property
    def email(self) -> Email:
        return self._email


__all__ = ["Resident"]
