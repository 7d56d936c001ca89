"""Storage backends."""

from file_store.stores.base import Store
from file_store.stores.file import FileStore
from file_store.stores.memory import InMemoryStore

__all__ = ["FileStore", "InMemoryStore", "Store"]
