"""file_store — a filesystem-backed key-value store with optional expiry.

Every key lives in its own file, named by a keyed hash of the key.  Entries
may carry an absolute expiry instant and are removed lazily once it passes.
"""

from file_store.config import FileStoreSettings
from file_store.exceptions import (
    ConstructionError,
    DeserializationError,
    FileStoreConfigError,
    FileStoreError,
    SerializationError,
    StorageError,
)
from file_store.serializers import JsonSerializer, PickleSerializer, Serializer, get_serializer
from file_store.stores import FileStore, InMemoryStore, Store

__all__ = [
    "ConstructionError",
    "DeserializationError",
    "FileStore",
    "FileStoreConfigError",
    "FileStoreError",
    "FileStoreSettings",
    "InMemoryStore",
    "JsonSerializer",
    "PickleSerializer",
    "SerializationError",
    "Serializer",
    "StorageError",
    "Store",
    "get_serializer",
]
