"""Shared fixtures: temp storage roots, an in-memory repository, image bytes."""

import io
import random
from contextlib import contextmanager
from datetime import datetime, timezone

import pytest
from PIL import Image

from vfs.config.settings import Settings
from vfs.core.exceptions import PersistenceError
from vfs.core.random_names import RandomNames
from vfs.entities.vfs_file import FileRecord, Folder, Status
from vfs.infrastructure.storage.local_file_storage import LocalFileStorage
from vfs.infrastructure.storage.vfs_config import VfsConfig
from vfs.main import create_app
from vfs.services.metadata_extractor import MetadataExtractor

FIXED_NOW = datetime(2026, 10, 18, 12, 30, tzinfo=timezone.utc)


def png_bytes(width: int = 4, height: int = 3) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (width, height), (200, 10, 10)).save(buf, format="PNG")
    return buf.getvalue()


class InMemoryVfsRepository:
    """Test double for the folder/file repository."""

    def __init__(self, folders=(), *, fail_on_add=False, fail_on_next_id=False):
        self.folders = {f.id: f for f in folders}
        self.files: dict[int, FileRecord] = {}
        self.fail_on_add = fail_on_add
        self.fail_on_next_id = fail_on_next_id
        self.on_add = None
        self._last_id = 0

    def get_folder(self, folder_id):
        return self.folders.get(folder_id)

    def next_file_id(self):
        if self.fail_on_next_id:
            raise PersistenceError("sequence unavailable")
        self._last_id += 1
        return self._last_id

    def add_file(self, record):
        if self.on_add is not None:
            self.on_add(record)
        if self.fail_on_add:
            raise PersistenceError("insert failed")
        self.files[record.id] = record
        return record


class FixedNames(RandomNames):
    def sequence(self, n):
        return "x" * n


def make_folder(folder_id=1, title="photos"):
    return Folder(
        id=folder_id,
        parent_id=None,
        title=title,
        created_at=FIXED_NOW,
        status_id=Status.ENABLED,
    )


@pytest.fixture
def storage_root(tmp_path):
    root = tmp_path / "vfs"
    root.mkdir()
    return root


@pytest.fixture
def vfs_config(storage_root):
    return VfsConfig(
        max_file_size=1024 * 1024,
        path=str(storage_root),
        web_path="/media/",
        namespaces=("avatars",),
    )


@pytest.fixture
def storage(vfs_config):
    return LocalFileStorage(config=vfs_config)


@pytest.fixture
def repo():
    return InMemoryVfsRepository([make_folder(1)])


@pytest.fixture
def extractor():
    return MetadataExtractor(mime_sniffer=lambda prefix: "image/png" if prefix.startswith(b"\x89PNG") else "text/plain")


@pytest.fixture
def app_settings(storage_root):
    return Settings(
        vfs_path=str(storage_root),
        vfs_web_path="/media/",
        vfs_namespaces_raw="avatars",
        vfs_max_file_size=64 * 1024,
        db_url="sqlite://",
    )


@pytest.fixture
def app(app_settings, repo, extractor):
    @contextmanager
    def repo_scope():
        yield repo

    return create_app(
        app_settings,
        repo_scope=repo_scope,
        extractor=extractor,
        random_names=RandomNames(random.Random(7)),
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def client(app):
    return app.test_client()
