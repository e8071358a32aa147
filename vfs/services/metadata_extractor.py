# vfs/services/metadata_extractor.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from PIL import Image

from vfs.core.exceptions import StorageError
from vfs.entities.vfs_file import ImageParams

logger = logging.getLogger(__name__)

# bytes handed to the MIME sniffer
MIME_SNIFF_BYTES = 3072


@dataclass(frozen=True)
class FileMetadata:
    size: int
    params: Optional[ImageParams] = None
    mime_type: str = ""


def read_image_params(path: Path) -> ImageParams:
    # Image.open only parses the header; pixel data stays undecoded
    with Image.open(path) as im:
        width, height = im.size
    return ImageParams(width=width, height=height)


def sniff_mime_type(prefix: bytes) -> str:
    import magic

    return magic.from_buffer(prefix, mime=True)


class MetadataExtractor:
    """Collects size, image dimensions and MIME type of a stored file.

    Only the size is required. Dimensions and MIME type are best effort:
    a failure is logged and the field is left empty.
    """

    def __init__(
        self,
        *,
        image_reader: Callable[[Path], ImageParams] = read_image_params,
        mime_sniffer: Callable[[bytes], str] = sniff_mime_type,
        sniff_bytes: int = MIME_SNIFF_BYTES,
    ) -> None:
        self._image_reader = image_reader
        self._mime_sniffer = mime_sniffer
        self._sniff_bytes = sniff_bytes

    def extract(self, path: Path) -> FileMetadata:
        return FileMetadata(
            size=self._size(path),
            params=self._params(path),
            mime_type=self._mime_type(path),
        )

    def _size(self, path: Path) -> int:
        try:
            return os.stat(path).st_size
        except OSError as e:
            raise StorageError(f"failed to stat '{path.name}': {e}") from e

    def _params(self, path: Path) -> Optional[ImageParams]:
        try:
            return self._image_reader(path)
        except Exception as e:
            logger.info("no image dimensions for %s: %s", path.name, e)
            return None

    def _mime_type(self, path: Path) -> str:
        try:
            with open(path, "rb") as f:
                prefix = f.read(self._sniff_bytes)
            return self._mime_sniffer(prefix) or ""
        except Exception as e:
            logger.info("no mime type for %s: %s", path.name, e)
            return ""
