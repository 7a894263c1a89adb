"""Session storage abstractions. Extend by implementing the SessionStorage protocol."""

from commons.storage.base import SessionStorage
from commons.storage.local import InMemorySessionStorage, JsonFileSessionStorage

__all__ = ["SessionStorage", "InMemorySessionStorage", "JsonFileSessionStorage"]
