# vfs/infrastructure/storage/local_file_storage.py
from __future__ import annotations

import hashlib
import logging
import os
import posixpath
import tempfile
from pathlib import Path
from typing import BinaryIO

from vfs.core.exceptions import StorageError, ValidationError
from vfs.core.file_hash import FileHash
from vfs.infrastructure.storage.file_storage import FileStorage
from vfs.infrastructure.storage.vfs_config import VfsConfig

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024  # 1MB
TEMP_PREFIX = "vfs"


class LocalFileStorage(FileStorage):
    """Virtual file store on a single local volume.

    Layout under the configured root:

        <ns>/<h[0]>/<h[1:3]>/<h>.jpg          content-addressed files
        <ns>/<relative path>                  plain uploads (foldered files)

    Nothing here locks the tree. Two publishes of the same content race to
    the same destination with the same bytes, so whichever rename lands last
    is indistinguishable from the other.
    """

    def __init__(self, *, config: VfsConfig) -> None:
        self._config = config

        raw = (config.path or "").strip()
        if not raw:
            raise StorageError("VFS storage root is not configured (VFS_PATH is empty).")

        self._base = Path(raw).expanduser().resolve()

        if not self._base.exists():
            raise StorageError(f"VFS storage root does not exist: '{self._base}'.")

        if not self._base.is_dir():
            raise StorageError(f"VFS storage root is not a directory: '{self._base}'.")

        if not os.access(self._base, os.W_OK):
            raise StorageError(f"VFS storage root is not writable: '{self._base}'.")

    @property
    def config(self) -> VfsConfig:
        return self._config

    @property
    def base(self) -> Path:
        return self._base

    def path(self, ns: str, rel_path: str) -> Path:
        rel = Path(ns) / rel_path
        abs_path = (self._base / rel).resolve()

        # anti path traversal
        base_str = str(self._base)
        abs_str = str(abs_path)
        if not (abs_str == base_str or abs_str.startswith(base_str + os.sep)):
            raise ValidationError("invalid path (path traversal)")

        return abs_path

    def full_dir(self, ns: str, h: FileHash) -> Path:
        return self.path(ns, h.dir())

    def full_file(self, ns: str, h: FileHash) -> Path:
        return self.path(ns, h.file())

    def web_path(self, ns: str) -> str:
        return posixpath.join(self._config.web_path, ns)

    def web_hash_path(self, ns: str, h: FileHash) -> str:
        return posixpath.join(self._config.web_path, ns, h.file())

    def upload(self, fileobj: BinaryIO, rel_filename: str, ns: str) -> None:
        abs_path = self.path(ns, rel_filename)

        try:
            abs_path.parent.mkdir(parents=True, exist_ok=True)
            with open(abs_path, "wb") as out:
                _copy(fileobj, out)
                out.flush()
                os.fsync(out.fileno())
        except OSError as e:
            raise StorageError(f"failed to write '{rel_filename}': {e}") from e

        logger.debug("stored %s in namespace %r", rel_filename, ns)

    def move(self, ns: str, current_path: str, new_path: str) -> None:
        src = self.path(ns, current_path)
        dst = self.path(ns, new_path)

        try:
            dst.parent.mkdir(parents=True, exist_ok=True)
            # same volume only, no copy+delete fallback
            os.rename(src, dst)
        except OSError as e:
            raise StorageError(f"failed to move '{current_path}' to '{new_path}': {e}") from e

        logger.debug("moved %s -> %s in namespace %r", current_path, new_path, ns)

    def hash_upload(self, fileobj: BinaryIO, ns: str) -> FileHash:
        if not self._config.is_valid_namespace(ns):
            raise ValidationError("invalid namespace")

        try:
            fd, temp_name = tempfile.mkstemp(prefix=TEMP_PREFIX, dir=self._base)
        except OSError as e:
            raise StorageError(f"failed to create temp file: {e}") from e

        temp_file = os.fdopen(fd, "wb")
        try:
            digest = hashlib.md5(usedforsecurity=False)
            _copy(fileobj, temp_file, digest)

            # data must be on disk before the hash becomes visible
            temp_file.flush()
            os.fsync(temp_file.fileno())
            temp_file.close()

            fh = FileHash(digest.hexdigest())
            dest = self.full_file(ns, fh)
            dest.parent.mkdir(parents=True, exist_ok=True)
            os.replace(temp_name, dest)
        except OSError as e:
            _discard_temp(temp_file, temp_name)
            raise StorageError(f"hash upload failed: {e}") from e
        except BaseException:
            _discard_temp(temp_file, temp_name)
            raise

        logger.info("published %s in namespace %r", fh, ns)
        return fh


def _copy(src: BinaryIO, dst: BinaryIO, digest=None) -> int:
    size = 0
    while True:
        chunk = src.read(CHUNK_SIZE)
        if not chunk:
            break
        dst.write(chunk)
        if digest is not None:
            digest.update(chunk)
        size += len(chunk)
    return size


def _discard_temp(temp_file: BinaryIO, temp_name: str) -> None:
    # an error is already on its way up; cleanup failures must not replace it
    try:
        temp_file.close()
    except OSError:
        logger.warning("failed to close temp file %s", temp_name, exc_info=True)
    try:
        os.remove(temp_name)
    except FileNotFoundError:
        pass
    except OSError:
        logger.warning("failed to remove temp file %s", temp_name, exc_info=True)
