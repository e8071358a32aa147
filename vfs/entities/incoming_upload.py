# vfs/entities/incoming_upload.py
from dataclasses import dataclass
from typing import BinaryIO


@dataclass(frozen=True)
class IncomingUpload:
    stream: BinaryIO
    size: int  # -1 when the client did not declare a length
    name: str = ""
    ext: str = ""
