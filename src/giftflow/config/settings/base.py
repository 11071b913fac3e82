"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class Settings:
    """Dataclass settings read from ``<PREFIX>_<FIELD>`` environment keys.

    ``_validate`` runs from ``__post_init__``: an instance that exists has
    passed validation.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable holding *field_name*, e.g. ``GIFTFLOW_MAX_STOCK``."""
        return "_".join(part for part in (cls._prefix, field_name) if part).upper()

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        pass


__all__ = ["Settings"]
