from datetime import datetime

import pytest

from vfs.core.exceptions import PersistenceError
from vfs.entities.vfs_file import FileRecord, ImageParams, Status
from vfs.infrastructure.database.models import VfsFileModel, VfsFolderModel, create_schema
from vfs.infrastructure.database.session import make_engine, make_session_factory, session_scope
from vfs.repositories.vfs_file_repository import VfsFileRepository, _to_record


@pytest.fixture
def session_factory():
    engine = make_engine("sqlite://")
    create_schema(engine)
    return make_session_factory(engine)


def add_folder(session, title, parent_id=None):
    model = VfsFolderModel(title=title, parent_id=parent_id)
    session.add(model)
    session.flush()
    return model.id


def load_file(session, file_id):
    model = session.get(VfsFileModel, file_id)
    return _to_record(model) if model is not None else None


def make_record(file_id, folder_id, **overrides):
    values = dict(
        id=file_id,
        folder_id=folder_id,
        title="holiday",
        path=f"202610/{folder_id}_{file_id}.png",
        params=ImageParams(width=4, height=3),
        mime_type="image/png",
        file_size=120,
        file_exists=True,
        status_id=Status.ENABLED,
        created_at=datetime(2026, 10, 18, 12, 30),
    )
    values.update(overrides)
    return FileRecord(**values)


def test_get_folder(session_factory):
    with session_scope(session_factory) as session:
        repo = VfsFileRepository(session)
        folder = repo.get_folder(add_folder(session, "photos"))

    assert folder.title == "photos"
    assert folder.parent_id is None
    assert folder.status_id == Status.ENABLED


def test_get_folder_missing(session_factory):
    with session_scope(session_factory) as session:
        assert VfsFileRepository(session).get_folder(12345) is None


def test_next_file_id_is_sequential(session_factory):
    with session_scope(session_factory) as session:
        repo = VfsFileRepository(session)
        folder_id = add_folder(session, "photos")

        first = repo.next_file_id()
        repo.add_file(make_record(first, folder_id))
        second = repo.next_file_id()

    assert first == 1
    assert second == 2


def test_add_file_round_trip(session_factory):
    with session_scope(session_factory) as session:
        repo = VfsFileRepository(session)
        folder_id = add_folder(session, "photos")
        stored = repo.add_file(make_record(7, folder_id))

    with session_scope(session_factory) as session:
        loaded = load_file(session, 7)

    assert stored.id == 7
    assert loaded.path == f"202610/{folder_id}_7.png"
    assert loaded.params == ImageParams(width=4, height=3)
    assert loaded.mime_type == "image/png"
    assert loaded.file_size == 120
    assert loaded.file_exists is True


def test_add_file_without_params(session_factory):
    with session_scope(session_factory) as session:
        repo = VfsFileRepository(session)
        folder_id = add_folder(session, "docs")
        repo.add_file(make_record(1, folder_id, params=None, mime_type=""))

        assert load_file(session, 1).params is None


def test_duplicate_id_is_a_persistence_error(session_factory):
    with pytest.raises(PersistenceError):
        with session_scope(session_factory) as session:
            repo = VfsFileRepository(session)
            folder_id = add_folder(session, "photos")
            repo.add_file(make_record(1, folder_id))
            repo.add_file(make_record(1, folder_id))


def test_missing_schema_is_a_persistence_error():
    factory = make_session_factory(make_engine("sqlite://"))

    with pytest.raises(PersistenceError):
        with session_scope(factory) as session:
            VfsFileRepository(session).get_folder(1)
