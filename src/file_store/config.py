"""Store settings.

Attributes map one-to-one onto :class:`~file_store.stores.FileStore`
constructor arguments, so a store can be built from a config file or the
environment with :meth:`FileStore.from_settings`.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field, field_validator

from file_store.exceptions import FileStoreConfigError

DEFAULT_FOLDER = "file_store"
DEFAULT_DIR_MODE = 0o770


class FileStoreSettings(BaseModel):
    """Settings for a filesystem store.

    Attributes:
        root_path:   Existing, writable parent directory.
        folder_name: Sub-directory of ``root_path`` that holds the entries.
        serializer:  Registered serializer name (``"json"`` or ``"pickle"``).
        dir_mode:    Permission bits used when the folder is created.
    """

    root_path: str
    folder_name: str = DEFAULT_FOLDER
    serializer: str = "json"
    dir_mode: int = Field(default=DEFAULT_DIR_MODE, ge=0, le=0o7777)

    @field_validator("root_path")
    @classmethod
    def _root_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("root_path must not be empty")
        return value

    @classmethod
    def from_env(cls, prefix: str = "FILE_STORE_") -> FileStoreSettings:
        """Build settings from ``<prefix>ROOT_PATH``, ``FOLDER``, ``SERIALIZER``, ``DIR_MODE``.

        ``DIR_MODE`` is an octal string such as ``"750"``.
        """
        root_path = os.getenv(f"{prefix}ROOT_PATH")
        if not root_path:
            raise FileStoreConfigError("root_path", f"{prefix}ROOT_PATH is not set")

        raw_mode = os.getenv(f"{prefix}DIR_MODE")
        dir_mode = DEFAULT_DIR_MODE
        if raw_mode:
            try:
                dir_mode = int(raw_mode, 8)
            except ValueError:
                raise FileStoreConfigError("dir_mode", f"'{raw_mode}' is not an octal mode") from None

        return cls(
            root_path=root_path,
            folder_name=os.getenv(f"{prefix}FOLDER", DEFAULT_FOLDER),
            serializer=os.getenv(f"{prefix}SERIALIZER", "json"),
            dir_mode=dir_mode,
        )
