# vfs/api/routes/health_routes.py
import os

from flask import Blueprint, jsonify
from sqlalchemy import text

from vfs.api.vfs_extension import current_vfs
from vfs.infrastructure.database.session import session_scope

bp_health = Blueprint("health", __name__, url_prefix="/health")


@bp_health.get("")
def health():
    return jsonify({"status": "ok"}), 200


@bp_health.get("/db")
def health_db():
    vfs = current_vfs()
    if vfs.session_factory is None:
        return jsonify({"db": "not configured"}), 503

    with session_scope(vfs.session_factory) as session:
        session.execute(text("select 1"))
    return jsonify({"db": "ok"}), 200


@bp_health.get("/storage")
def health_storage():
    base = current_vfs().storage.base
    if not base.is_dir() or not os.access(base, os.W_OK):
        return jsonify({"storage": "unavailable"}), 503
    return jsonify({"storage": "ok"}), 200
