# vfs/api/vfs_extension.py
from __future__ import annotations

from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterator

from flask import current_app
from sqlalchemy.orm import sessionmaker

from vfs.core.interfaces.vfs_repository import VfsRepository
from vfs.core.random_names import RandomNames
from vfs.infrastructure.database.session import session_scope
from vfs.infrastructure.storage.local_file_storage import LocalFileStorage
from vfs.infrastructure.storage.vfs_config import VfsConfig
from vfs.repositories.vfs_file_repository import VfsFileRepository
from vfs.services.metadata_extractor import MetadataExtractor
from vfs.services.upload_service import UploadService

RepoScope = Callable[[], AbstractContextManager[VfsRepository]]

EXTENSION_KEY = "vfs"


def make_sql_repo_scope(factory: sessionmaker) -> RepoScope:
    @contextmanager
    def scope() -> Iterator[VfsRepository]:
        with session_scope(factory) as session:
            yield VfsFileRepository(session)

    return scope


@dataclass(frozen=True)
class VfsExtension:
    config: VfsConfig
    storage: LocalFileStorage
    repo_scope: RepoScope
    extractor: MetadataExtractor
    random_names: RandomNames
    clock: Callable[[], datetime]
    session_factory: sessionmaker | None = None

    def upload_service(self, repo: VfsRepository | None = None) -> UploadService:
        return UploadService(
            storage=self.storage,
            repo=repo,
            extractor=self.extractor,
            random_names=self.random_names,
            clock=self.clock,
            salted_filenames=self.config.salted_filenames,
        )


def current_vfs() -> VfsExtension:
    return current_app.extensions[EXTENSION_KEY]
