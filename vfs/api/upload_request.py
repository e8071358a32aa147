# vfs/api/upload_request.py
from __future__ import annotations

import os
import posixpath
from typing import BinaryIO

from flask import Request

from vfs.core.exceptions import PayloadTooLargeError, ValidationError
from vfs.entities.incoming_upload import IncomingUpload

# room for multipart boundaries, part headers and the other form fields
MULTIPART_OVERHEAD = 64 * 1024


def split_filename(filename: str) -> tuple[str, str]:
    """'photo.final.png' -> ('photo.final', 'png')"""
    name, ext = posixpath.splitext(filename)
    return name, ext.lstrip(".")


def _too_large(max_size: int) -> PayloadTooLargeError:
    return PayloadTooLargeError(f"file size exceed {max_size} bytes")


def _check_size(size: int, max_size: int) -> None:
    if size > max_size:
        raise _too_large(max_size)


def _file_size(stream: BinaryIO) -> int:
    pos = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(pos)
    return size


def check_declared_size(request: Request, *, max_size: int) -> None:
    """Rejects on Content-Length alone, before anything reads the body."""
    length = request.content_length
    if length is None:
        return

    limit = max_size if request.method == "PUT" else max_size + MULTIPART_OVERHEAD
    if length > limit:
        raise _too_large(max_size)


def read_upload(request: Request, *, form_name: str, max_size: int) -> IncomingUpload:
    """Classifies the request and returns the body to store.

    PUT streams the raw body and trusts Content-Length as the size; a client
    that understates it is not caught here. POST expects multipart/form-data
    with the file under ``form_name``.
    """
    if request.method == "PUT":
        size = request.content_length if request.content_length is not None else -1
        _check_size(size, max_size)
        return IncomingUpload(stream=request.stream, size=size)

    if request.method != "POST":
        raise ValidationError(f"unsupported method {request.method}")

    check_declared_size(request, max_size=max_size)

    file = request.files.get(form_name)

    if file is None:
        raise ValidationError(f"missing multipart file field '{form_name}'")

    try:
        size = _file_size(file.stream)
    except (OSError, ValueError) as e:
        raise ValidationError(f"unreadable multipart file: {e}") from e

    _check_size(size, max_size)

    name, ext = split_filename(file.filename or "")
    return IncomingUpload(stream=file.stream, size=size, name=name, ext=ext)
