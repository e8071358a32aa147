# vfs/entities/vfs_file.py
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Optional


class Status(IntEnum):
    ENABLED = 1
    DISABLED = 2
    DELETED = 3


@dataclass(frozen=True)
class ImageParams:
    width: int
    height: int


@dataclass(frozen=True)
class Folder:
    id: int
    parent_id: Optional[int]
    title: str
    created_at: datetime
    status_id: int


@dataclass(frozen=True)
class FileRecord:
    id: int
    folder_id: int
    title: str
    path: str
    params: Optional[ImageParams]
    mime_type: str
    file_size: int
    file_exists: bool
    status_id: int
    created_at: datetime
