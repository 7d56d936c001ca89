"""Store protocol — key-value persistence with optional expiry."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

ExpireAt = int | datetime


class Store(ABC):
    """Abstract base for all storage backends.

    Keys are opaque strings chosen by the caller.  ``expire_at`` is an
    absolute instant (unix seconds or a ``datetime``); an entry whose
    instant is in the past is treated as absent and dropped on next access.
    """

    @abstractmethod
    def write(self, key: str, value: Any, expire_at: ExpireAt | None = None) -> None:
        """Create or overwrite a value.  No-op if *value* is empty."""
        ...

    @abstractmethod
    def read(self, key: str) -> Any | None:
        """Return the stored value, or ``None`` if missing or expired."""
        ...

    @abstractmethod
    def has(self, key: str) -> bool:
        """Return ``True`` if a live value exists for *key*."""
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """Delete a value.  No-op if the key does not exist."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Delete every value in the store."""
        ...


def to_unix_seconds(expire_at: ExpireAt | None) -> int | None:
    """Normalize an expiry argument to whole unix seconds."""
    if expire_at is None:
        return None
    if isinstance(expire_at, datetime):
        return int(expire_at.timestamp())
    return int(expire_at)


def is_empty(value: Any) -> bool:
    """Values that are never persisted: falsy values and the string ``"0"``."""
    return not value or (isinstance(value, str) and value == "0")
