# vfs/api/routes/upload_routes.py

from __future__ import annotations

import logging

from flask import Blueprint, jsonify, request

from vfs.api.schemas.upload_schema import UploadResponse
from vfs.api.upload_request import check_declared_size, read_upload
from vfs.api.vfs_extension import current_vfs
from vfs.core.exceptions import AppError
from vfs.services.upload_service import UploadOutcome

logger = logging.getLogger(__name__)

bp_upload = Blueprint("upload", __name__)


# -------------------------
# Helpers
# -------------------------

def _form_value(name: str) -> str:
    # PUT bodies are the file itself: only the query string carries fields
    if request.method == "PUT":
        return request.args.get(name, "")
    return request.values.get(name, "")


def _respond(outcome: UploadOutcome):
    payload = UploadResponse.from_outcome(outcome).to_json()
    return jsonify(payload), outcome.code


def _failed(err: AppError) -> UploadOutcome:
    logger.warning("upload failed (%s): %s", err.status_code, err)
    return UploadOutcome.from_error(err)


# -------------------------
# Hash upload
# -------------------------

@bp_upload.route("/hash", methods=["PUT", "POST"])
def hash_upload():
    vfs = current_vfs()
    max_size = vfs.config.max_file_size

    try:
        # before _form_value: on POST it parses the whole multipart body
        check_declared_size(request, max_size=max_size)
        ns = _form_value("ns")
        incoming = read_upload(request, form_name=vfs.config.upload_form_name, max_size=max_size)
        outcome = vfs.upload_service().hash_upload(incoming, ns)
    except AppError as err:
        outcome = _failed(err)

    return _respond(outcome)


# -------------------------
# Foldered upload (file + record)
# -------------------------

@bp_upload.route("/file", methods=["PUT", "POST"])
def folder_upload():
    vfs = current_vfs()
    max_size = vfs.config.max_file_size

    try:
        check_declared_size(request, max_size=max_size)
    except AppError as err:
        return _respond(_failed(err))

    ns = _form_value("ns")
    raw_folder_id = _form_value("folderId")
    try:
        folder_id = int(raw_folder_id)
    except ValueError:
        return jsonify({"error": f"bad folder {raw_folder_id!r}"}), 400

    try:
        with vfs.repo_scope() as repo:
            svc = vfs.upload_service(repo)
            folder = svc.get_folder(folder_id)
            incoming = read_upload(request, form_name=vfs.config.upload_form_name, max_size=max_size)
            outcome = svc.folder_upload(folder, incoming, ns)
    except AppError as err:
        outcome = _failed(err)

    return _respond(outcome)
