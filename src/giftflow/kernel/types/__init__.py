"""Kernel value-object types – public re-export surface.

Modules:
  ids.py    – EntityId, IdGenerator, UuidV7Generator
  email.py  – Email
"""

from giftflow.kernel.types.email import Email
from giftflow.kernel.types.ids import EntityId, IdGenerator, UuidV7Generator, uuid7_str

__all__ = ["Email", "EntityId", "IdGenerator", "UuidV7Generator", "uuid7_str"]
