# vfs/api/routes/__init__.py

from flask import Flask

from vfs.api.routes.health_routes import bp_health
from vfs.api.routes.upload_routes import bp_upload


def register_routes(app: Flask, *, api_prefix: str, app_prefix: str) -> None:
    # health lives outside /api
    app.register_blueprint(bp_health, url_prefix=f"{app_prefix}/health")

    app.register_blueprint(bp_upload, url_prefix=f"{api_prefix}/upload")
