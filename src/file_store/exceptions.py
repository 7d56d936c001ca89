"""Custom exceptions for the file_store package.

A cache miss is never an exception: ``read`` returns ``None`` and ``has``
returns ``False``.  Everything below is a real fault.
"""

from __future__ import annotations


class FileStoreError(Exception):
    """Base exception for all file_store errors."""


class ConstructionError(FileStoreError):
    """Raised when the store directory cannot be prepared.  Fatal."""

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        super().__init__(f"{detail}: {path}")


class StorageError(FileStoreError):
    """Raised when writing an entry to disk fails.

    The underlying ``OSError`` is available as ``__cause__``.
    """

    def __init__(self, operation: str, detail: str = "") -> None:
        self.operation = operation
        msg = f"Storage error during '{operation}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class SerializationError(FileStoreError):
    """Raised when a value cannot be turned into bytes."""


class DeserializationError(FileStoreError):
    """Raised when stored bytes of a live entry cannot be turned back into a value."""


class FileStoreConfigError(FileStoreError):
    """Raised when store settings are invalid."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"Invalid setting '{field}': {message}")
