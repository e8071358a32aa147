# vfs/services/upload_service.py
from __future__ import annotations

import logging
import posixpath
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional

from vfs.core.exceptions import AppError, NotFoundError
from vfs.core.interfaces.vfs_repository import VfsRepository
from vfs.core.random_names import RandomNames
from vfs.entities.incoming_upload import IncomingUpload
from vfs.entities.vfs_file import FileRecord, Folder, Status
from vfs.infrastructure.storage.file_storage import FileStorage
from vfs.services.metadata_extractor import MetadataExtractor

logger = logging.getLogger(__name__)

TEMP_NAME_LENGTH = 16
SALT_LENGTH = 8


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class UploadOutcome:
    code: int
    error: Optional[str] = None
    hash: Optional[str] = None
    web_path: Optional[str] = None
    file_id: Optional[int] = None
    extension: Optional[str] = None
    name: Optional[str] = None

    @classmethod
    def from_error(cls, err: AppError) -> "UploadOutcome":
        return cls(code=err.status_code, error=str(err))


class UploadService:
    def __init__(
        self,
        *,
        storage: FileStorage,
        repo: VfsRepository | None = None,
        extractor: MetadataExtractor | None = None,
        random_names: RandomNames | None = None,
        clock: Callable[[], datetime] = utc_now,
        salted_filenames: bool = False,
    ) -> None:
        self._storage = storage
        self._repo = repo
        self._extractor = extractor or MetadataExtractor()
        self._names = random_names or RandomNames()
        self._clock = clock
        self._salted = salted_filenames

    def hash_upload(self, incoming: IncomingUpload, ns: str) -> UploadOutcome:
        h = self._storage.hash_upload(incoming.stream, ns)
        return UploadOutcome(code=200, hash=str(h), web_path=self._storage.web_hash_path(ns, h))

    def get_folder(self, folder_id: int) -> Folder:
        folder = self._require_repo().get_folder(folder_id)
        if folder is None:
            raise NotFoundError("folder not found")
        return folder

    def folder_upload(self, folder: Folder, incoming: IncomingUpload, ns: str) -> UploadOutcome:
        """Stores the upload under a dated path and records it in the folder.

        The file is moved to its final path before the record is inserted.
        If the insert fails the file stays there; nothing rolls it back.
        """
        repo = self._require_repo()

        temp_name = "temp" + self._names.sequence(TEMP_NAME_LENGTH)
        self._storage.upload(incoming.stream, temp_name, ns)

        file_id = repo.next_file_id()
        final_path = self.final_path(folder.id, file_id, incoming.ext)
        self._storage.move(ns, temp_name, final_path)

        meta = self._extractor.extract(self._storage.path(ns, final_path))

        record = FileRecord(
            id=file_id,
            folder_id=folder.id,
            title=incoming.name,
            path=final_path,
            params=meta.params,
            mime_type=meta.mime_type,
            file_size=meta.size,
            file_exists=True,
            status_id=Status.ENABLED,
            created_at=self._clock(),
        )
        stored = repo.add_file(record)

        logger.info("file %s stored at %s (folder %s, ns %r)", stored.id, final_path, folder.id, ns)
        return UploadOutcome(code=200, file_id=stored.id, extension=incoming.ext, name=incoming.name)

    def final_path(self, folder_id: int, file_id: int, ext: str) -> str:
        salt = ""
        if self._salted:
            salt = "_" + self._names.sequence(SALT_LENGTH)

        filename = f"{folder_id}_{file_id}{salt}"  # like 1_9
        if ext:
            filename = f"{filename}.{ext}"

        return posixpath.join(self._clock().strftime("%Y%m"), filename)

    def _require_repo(self) -> VfsRepository:
        if self._repo is None:
            raise RuntimeError("UploadService was built without a repository")
        return self._repo
