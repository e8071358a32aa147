# vfs/main.py
from __future__ import annotations

import os
from datetime import datetime
from typing import Callable

from flask import Flask
from flask_cors import CORS

from vfs.api.middlewares.error_handler import register_error_handlers
from vfs.api.routes import register_routes
from vfs.api.vfs_extension import EXTENSION_KEY, RepoScope, VfsExtension, make_sql_repo_scope
from vfs.config.flask_config import configure_app
from vfs.config.logging_config import configure_logging
from vfs.config.settings import Settings, settings as default_settings
from vfs.core.random_names import RandomNames
from vfs.infrastructure.database.models import create_schema
from vfs.infrastructure.database.session import make_engine, make_session_factory
from vfs.infrastructure.storage.local_file_storage import LocalFileStorage
from vfs.infrastructure.storage.vfs_config import VfsConfig
from vfs.services.metadata_extractor import MetadataExtractor
from vfs.services.upload_service import utc_now


# -------------------------
# Prefixes (subpath)
# -------------------------
APP_PREFIX = os.getenv("APP_PREFIX", "/vfs").rstrip("/")
API_PREFIX = f"{APP_PREFIX}/api"


def create_app(
    settings: Settings | None = None,
    *,
    repo_scope: RepoScope | None = None,
    extractor: MetadataExtractor | None = None,
    random_names: RandomNames | None = None,
    clock: Callable[[], datetime] | None = None,
) -> Flask:
    if settings is None:
        settings = default_settings

    app = Flask(__name__)

    if settings.cors_origins:
        CORS(
            app,
            resources={rf"{API_PREFIX}/*": {"origins": settings.cors_origins}},
            allow_headers=["Content-Type", "Authorization"],
            methods=["POST", "PUT", "OPTIONS"],
        )

    configure_app(app, settings)

    vfs_config = VfsConfig.from_settings(settings)

    session_factory = None
    if repo_scope is None:
        engine = make_engine(settings.database_url, echo=settings.debug)
        if settings.db_create_schema:
            create_schema(engine)
        session_factory = make_session_factory(engine)
        repo_scope = make_sql_repo_scope(session_factory)

    app.extensions[EXTENSION_KEY] = VfsExtension(
        config=vfs_config,
        storage=LocalFileStorage(config=vfs_config),
        repo_scope=repo_scope,
        extractor=extractor or MetadataExtractor(),
        random_names=random_names or RandomNames(),
        clock=clock or utc_now,
        session_factory=session_factory,
    )

    register_routes(app, api_prefix=API_PREFIX, app_prefix=APP_PREFIX)

    register_error_handlers(app)

    return app


def create_wsgi_app() -> Flask:
    # gunicorn "vfs.main:create_wsgi_app()"
    configure_logging(default_settings.log_level, default_settings.log_file)
    return create_app(default_settings)


if __name__ == "__main__":
    # dev only
    create_wsgi_app().run(host="0.0.0.0", port=5000)
