"""Application CQRS – Command, CommandHandler."""
from __future__ import annotations

import abc
from typing import Any, Generic, TypeVar

C = TypeVar("C", bound="Command")


class Command:
    """Marker base for commands (intent to change state)."""


class CommandHandler(abc.ABC, Generic[C]):
    """Handle a single command type inside one unit of work."""

    @abc.abstractmethod
    def handle(self, command: C) -> Any: ...

    def __call__(self, command: C) -> Any:
        return self.handle(command)


__all__ = ["Command", "CommandHandler"]
