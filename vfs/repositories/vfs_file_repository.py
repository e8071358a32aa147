# vfs/repositories/vfs_file_repository.py
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vfs.core.base_repository import BaseRepository
from vfs.core.exceptions import PersistenceError
from vfs.entities.vfs_file import FileRecord, Folder, ImageParams
from vfs.infrastructure.database.models.vfs_file_model import VfsFileModel, vfs_file_id_seq
from vfs.infrastructure.database.models.vfs_folder_model import VfsFolderModel


class VfsFileRepository(BaseRepository[VfsFileModel]):
    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def get_folder(self, folder_id: int) -> Folder | None:
        try:
            row = self._session.get(VfsFolderModel, folder_id)
        except SQLAlchemyError as e:
            raise PersistenceError(f"folder lookup failed: {e}") from e

        if row is None:
            return None
        return Folder(
            id=row.id,
            parent_id=row.parent_id,
            title=row.title,
            created_at=row.created_at,
            status_id=row.status_id,
        )

    def next_file_id(self) -> int:
        try:
            if self._session.get_bind().dialect.supports_sequences:
                return int(self._session.scalar(vfs_file_id_seq.next_value()))

            # sqlite & co: no sequences
            stmt = select(func.coalesce(func.max(VfsFileModel.id), 0) + 1)
            return int(self._session.scalar(stmt))
        except SQLAlchemyError as e:
            raise PersistenceError(f"file id allocation failed: {e}") from e

    def add_file(self, record: FileRecord) -> FileRecord:
        params = None
        if record.params is not None:
            params = {"width": record.params.width, "height": record.params.height}

        model = VfsFileModel(
            id=record.id,
            folder_id=record.folder_id,
            title=record.title,
            path=record.path,
            params=params,
            mime_type=record.mime_type,
            file_size=record.file_size,
            file_exists=record.file_exists,
            status_id=int(record.status_id),
            created_at=record.created_at,
        )

        try:
            self._session.add(model)
            self._session.flush()
        except SQLAlchemyError as e:
            raise PersistenceError(f"file insert failed: {e}") from e

        return _to_record(model)


def _to_record(model: VfsFileModel) -> FileRecord:
    params = None
    if model.params:
        params = ImageParams(width=model.params["width"], height=model.params["height"])

    return FileRecord(
        id=model.id,
        folder_id=model.folder_id,
        title=model.title,
        path=model.path,
        params=params,
        mime_type=model.mime_type,
        file_size=model.file_size,
        file_exists=model.file_exists,
        status_id=model.status_id,
        created_at=model.created_at,
    )
