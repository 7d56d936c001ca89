"""InMemoryStore — dict-backed storage for development and testing."""

from __future__ import annotations

from typing import Any

from file_store._internal.clock import Clock, SystemClock, unix_seconds
from file_store.envelope import is_expired
from file_store.stores.base import ExpireAt, Store, is_empty, to_unix_seconds


class InMemoryStore(Store):
    """In-memory store with the same expiry rules as :class:`FileStore`.

    Values are kept as-is, not serialized.  Data is lost on process exit.
    """

    def __init__(self, *, clock: Clock | None = None) -> None:
        self._data: dict[str, tuple[Any, int | None]] = {}
        self._clock = clock or SystemClock()

    def write(self, key: str, value: Any, expire_at: ExpireAt | None = None) -> None:
        if is_empty(value):
            return
        self._data[key] = (value, to_unix_seconds(expire_at))

    def read(self, key: str) -> Any | None:
        if not self._live(key):
            return None
        return self._data[key][0]

    def has(self, key: str) -> bool:
        return self._live(key)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()

    def _live(self, key: str) -> bool:
        entry = self._data.get(key)
        if entry is None:
            return False
        expire_at = entry[1]
        if expire_at is not None and is_expired(expire_at, unix_seconds(self._clock)):
            del self._data[key]
            return False
        return True
