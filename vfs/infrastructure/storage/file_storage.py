# vfs/infrastructure/storage/file_storage.py
from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Protocol

from vfs.core.file_hash import FileHash


class FileStorage(Protocol):
    def upload(self, fileobj: BinaryIO, rel_filename: str, ns: str) -> None:
        """Writes the stream verbatim to root/ns/rel_filename (not atomic)."""
        raise NotImplementedError

    def move(self, ns: str, current_path: str, new_path: str) -> None:
        """Renames a stored file inside the namespace, creating parent dirs."""
        raise NotImplementedError

    def hash_upload(self, fileobj: BinaryIO, ns: str) -> FileHash:
        """Publishes the stream atomically under its content hash."""
        raise NotImplementedError

    def path(self, ns: str, rel_path: str) -> Path:
        raise NotImplementedError

    def web_hash_path(self, ns: str, h: FileHash) -> str:
        raise NotImplementedError
