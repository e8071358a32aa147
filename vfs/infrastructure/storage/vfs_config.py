# vfs/infrastructure/storage/vfs_config.py
from __future__ import annotations

from dataclasses import dataclass

NAMESPACE_PUBLIC = ""
DEFAULT_UPLOAD_FORM_NAME = "file"


@dataclass(frozen=True)
class VfsConfig:
    max_file_size: int
    path: str
    web_path: str = "/"
    namespaces: tuple[str, ...] = ()
    upload_form_name: str = DEFAULT_UPLOAD_FORM_NAME
    salted_filenames: bool = False

    def __post_init__(self) -> None:
        # frozen: fix up via object.__setattr__
        if not self.upload_form_name:
            object.__setattr__(self, "upload_form_name", DEFAULT_UPLOAD_FORM_NAME)
        object.__setattr__(self, "namespaces", tuple(self.namespaces))

    def is_valid_namespace(self, ns: str) -> bool:
        if ns == NAMESPACE_PUBLIC:
            return True
        return ns in self.namespaces

    @classmethod
    def from_settings(cls, settings) -> "VfsConfig":
        return cls(
            max_file_size=settings.vfs_max_file_size,
            path=settings.vfs_path,
            web_path=settings.vfs_web_path,
            namespaces=settings.vfs_namespaces,
            upload_form_name=settings.vfs_upload_form_name,
            salted_filenames=settings.vfs_salted_filenames,
        )
