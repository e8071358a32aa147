# vfs/core/file_hash.py
from __future__ import annotations

# every content-addressed file gets this extension, whatever its real type
DEFAULT_HASH_EXTENSION = "jpg"


class FileHash(str):
    """Hex digest of a file's bytes, used as its content address.

    Files are sharded two levels deep (one hex char, then two) so no single
    directory grows without bound:

        FileHash("d41d8cd98f00b204e9800998ecf8427e").file()
        -> "d/41/d41d8cd98f00b204e9800998ecf8427e.jpg"
    """

    __slots__ = ()

    def dir(self) -> str:
        return f"{self[0]}/{self[1:3]}"

    def file(self) -> str:
        return f"{self.dir()}/{self}.{DEFAULT_HASH_EXTENSION}"


def shard_dir(h: str) -> str:
    return FileHash(h).dir()


def storage_path(h: str) -> str:
    return FileHash(h).file()
