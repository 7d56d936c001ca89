"""FileStore — one file per entry inside a single directory."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

from file_store import envelope
from file_store._internal.clock import Clock, SystemClock, unix_seconds
from file_store._internal.keys import derive_filename, directory_secret
from file_store.config import DEFAULT_DIR_MODE
from file_store.exceptions import ConstructionError, StorageError
from file_store.serializers import JsonSerializer, Serializer, get_serializer
from file_store.stores.base import ExpireAt, Store, is_empty, to_unix_seconds

if TYPE_CHECKING:
    from file_store.config import FileStoreSettings

logger = structlog.get_logger(__name__)

_TMP_PREFIX = ".tmp-"
_FILE_MODE = 0o666


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


class FileStore(Store):
    """Persistent store backed by a directory of files.

    Each key maps to ``<directory>/<hex HMAC-SHA256 of key>``.  The HMAC key
    is a digest of the directory path, so stores over different directories
    never share filenames.  The directory itself is the index: there is no
    in-memory state beyond the path and the secret.

    Expiring entries start with a ``#^e:<unix seconds>`` line (see
    :mod:`file_store.envelope`) and are removed lazily by ``read``/``has``.

    Parameters:
        root_path:   Existing, writable parent directory.
        folder_name: Entry directory under ``root_path``; created if missing.
        serializer:  Value serializer.  Defaults to :class:`JsonSerializer`.
        clock:       Injectable clock for testing.
        dir_mode:    Permission bits for a newly created entry directory.

    Raises:
        ConstructionError: If ``root_path`` or the entry directory is not
            writable, or the entry directory cannot be created.
    """

    def __init__(
        self,
        root_path: str | os.PathLike[str],
        folder_name: str,
        *,
        serializer: Serializer | None = None,
        clock: Clock | None = None,
        dir_mode: int = DEFAULT_DIR_MODE,
    ) -> None:
        root = os.fspath(root_path).rstrip("/") or "/"
        if not os.access(root, os.W_OK):
            raise ConstructionError(root, "Path not writable")

        directory = os.path.abspath(os.path.join(root, folder_name.lstrip("/")))
        if not os.path.isdir(directory):
            try:
                os.makedirs(directory, mode=dir_mode, exist_ok=True)
            except OSError as exc:
                raise ConstructionError(directory, "Directory not created") from exc

        if not os.access(directory, os.W_OK):
            raise ConstructionError(directory, "Directory not writable")

        self._directory = Path(directory)
        self._secret = directory_secret(directory)
        self._serializer: Serializer = serializer or JsonSerializer()
        self._clock = clock or SystemClock()
        self._file_mode = _FILE_MODE & ~_current_umask()

    @classmethod
    def from_settings(cls, settings: FileStoreSettings, *, clock: Clock | None = None) -> FileStore:
        return cls(
            settings.root_path,
            settings.folder_name,
            serializer=get_serializer(settings.serializer),
            clock=clock,
            dir_mode=settings.dir_mode,
        )

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, key: str) -> Path:
        """Return the file that backs *key*, whether or not it exists."""
        return self._directory / derive_filename(self._secret, key)

    # ── Store protocol ───────────────────────────────────────

    def write(self, key: str, value: Any, expire_at: ExpireAt | None = None) -> None:
        if is_empty(value):
            return

        path = self.path_for(key)
        data = envelope.encode(self._serializer.dumps(value), to_unix_seconds(expire_at))
        try:
            self._replace(path, data)
        except OSError as exc:
            logger.error("store_write_failed", path=str(path), error=str(exc))
            raise StorageError("write", str(exc)) from exc
        logger.debug("store_write", path=str(path), size=len(data), expire_at=expire_at)

    def read(self, key: str) -> Any | None:
        path = self.path_for(key)
        data = self._read_bytes(path)
        if data is None:
            return None

        payload = envelope.decode(data, unix_seconds(self._clock), lambda: self._expire(path))
        if payload is None:
            return None
        return self._serializer.loads(payload)

    def has(self, key: str) -> bool:
        path = self.path_for(key)
        line = self._read_first_line(path)
        if line is None:
            return False

        expire_at = envelope.read_expiry(line)
        if expire_at is not None and envelope.is_expired(expire_at, unix_seconds(self._clock)):
            self._expire(path)
            return False
        return True

    def delete(self, key: str) -> None:
        path = self.path_for(key)
        if self._unlink(path):
            logger.debug("store_delete", path=str(path))

    def clear(self) -> None:
        removed = 0
        with os.scandir(self._directory) as entries:
            for entry in entries:
                if entry.name.startswith(_TMP_PREFIX) or not entry.is_file():
                    continue
                if self._unlink(Path(entry.path)):
                    removed += 1
        logger.debug("store_clear", directory=str(self._directory), removed=removed)

    # ── internals ────────────────────────────────────────────

    def _replace(self, path: Path, data: bytes) -> None:
        # mkstemp opens with O_EXCL and mode 0600, so the temp file is private
        # to this writer until os.replace publishes it in one step.  Entries get
        # the umask-derived mode an ordinary open() would give them.
        fd, tmp = tempfile.mkstemp(prefix=_TMP_PREFIX, dir=self._directory)
        try:
            with os.fdopen(fd, "wb") as fh:
                os.fchmod(fh.fileno(), self._file_mode)
                fh.write(data)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp, path)
        except BaseException:
            self._unlink(Path(tmp))
            raise

    @staticmethod
    def _read_bytes(path: Path) -> bytes | None:
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            logger.warning("store_entry_unreadable", path=str(path), error=str(exc))
            return None

    @staticmethod
    def _read_first_line(path: Path) -> bytes | None:
        try:
            with path.open("rb") as fh:
                return fh.readline()
        except FileNotFoundError:
            return None
        except OSError as exc:
            logger.warning("store_entry_unreadable", path=str(path), error=str(exc))
            return None

    def _expire(self, path: Path) -> None:
        if self._unlink(path):
            logger.debug("store_expired", path=str(path))

    @staticmethod
    def _unlink(path: Path) -> bool:
        """Remove *path* if it is a file.  Returns ``True`` if something was removed."""
        try:
            path.unlink()
        except (FileNotFoundError, IsADirectoryError, PermissionError):
            return False
        return True
