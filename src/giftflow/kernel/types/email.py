"""Email value object for residents and gift requesters."""

from __future__ import annotations

import dataclasses
import re
from typing import Final

from giftflow.kernel.errors.domain import ValidationError

_LOCAL_PART: Final = re.compile(r"[a-z0-9._%+\-]+")
_DOMAIN_PART: Final = re.compile(r"(?:[a-z0-9\-]+\.)+[a-z]{2,}")


@dataclasses.dataclass(frozen=True, slots=True)
class Email:
    """Contact address, stored trimmed and lower-cased."""

    value: str

    def __post_init__(self) -> None:
        normalised = self.value.strip().lower()
        local, at, domain = normalised.partition("@")
        if not at or not _LOCAL_PART.fullmatch(local) or not _DOMAIN_PART.fullmatch(domain):
            raise ValidationError(
                f"{self.value!r} is not a valid email address",
                violations={"email": "invalid format"},
            )
        object.__setattr__(self, "value", normalised)

    def __str__(self) -> str:
        return self.value

    @property
    def domain(self) -> str:
        return self.value.partition("@")[2]


__all__ = ["Email"]
