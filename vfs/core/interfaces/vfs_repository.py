# vfs/core/interfaces/vfs_repository.py
from __future__ import annotations

from typing import Protocol

from vfs.entities.vfs_file import FileRecord, Folder


class VfsRepository(Protocol):
    def get_folder(self, folder_id: int) -> Folder | None:
        """Returns the folder, or None when it does not exist."""
        ...

    def next_file_id(self) -> int:
        """Allocates the next sequential file id."""
        ...

    def add_file(self, record: FileRecord) -> FileRecord:
        """Persists the record and returns it as stored."""
        ...
