"""Value serializers — turn stored values into bytes and back."""

from __future__ import annotations

import json
import pickle
from typing import Any, Protocol

from file_store.exceptions import DeserializationError, FileStoreConfigError, SerializationError


class Serializer(Protocol):
    """Converts values to bytes and back.

    Output must never start with ``#``, or it would be mistaken for an
    expiry marker.
    """

    def dumps(self, value: Any) -> bytes: ...

    def loads(self, data: bytes) -> Any: ...


class JsonSerializer:
    """Compact UTF-8 JSON.  Handles dicts, lists, strings, numbers, booleans.

    Values JSON would silently change (tuples, non-string dict keys, NaN)
    are rejected with :class:`SerializationError` instead of being stored
    in a lossy form.  Use :class:`PickleSerializer` for those.
    """

    def dumps(self, value: Any) -> bytes:
        try:
            text = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"Value of type {type(value).__name__} is not JSON serializable") from exc
        if json.loads(text) != value:
            raise SerializationError(f"Value of type {type(value).__name__} does not survive a JSON round trip")
        return text.encode("utf-8")

    def loads(self, data: bytes) -> Any:
        try:
            return json.loads(data.decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as exc:
            raise DeserializationError(f"Stored data is not valid JSON: {exc}") from exc


class PickleSerializer:
    """Pickle with the highest protocol.  Only load files you wrote yourself."""

    def dumps(self, value: Any) -> bytes:
        try:
            return pickle.dumps(value, protocol=pickle.HIGHEST_PROTOCOL)
        except (pickle.PicklingError, TypeError, AttributeError) as exc:
            raise SerializationError(f"Value of type {type(value).__name__} cannot be pickled") from exc

    def loads(self, data: bytes) -> Any:
        try:
            return pickle.loads(data)  # noqa: S301
        except Exception as exc:
            raise DeserializationError(f"Stored data cannot be unpickled: {exc}") from exc


_SERIALIZERS: dict[str, type[Serializer]] = {
    "json": JsonSerializer,
    "pickle": PickleSerializer,
}


def get_serializer(name: str) -> Serializer:
    """Return a fresh serializer instance registered under *name*."""
    try:
        serializer_class = _SERIALIZERS[name]
    except KeyError:
        available = ", ".join(sorted(_SERIALIZERS))
        raise FileStoreConfigError("serializer", f"unknown serializer '{name}' (available: {available})") from None
    return serializer_class()
