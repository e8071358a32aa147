from vfs.infrastructure.database.models.vfs_file_model import VfsFileModel
from vfs.infrastructure.database.models.vfs_folder_model import VfsFolderModel
from vfs.infrastructure.database.base_model import BaseModel

__all__ = ["VfsFileModel", "VfsFolderModel", "create_schema"]


def create_schema(engine) -> None:
    BaseModel.metadata.create_all(engine)
