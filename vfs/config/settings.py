# vfs/config/settings.py
import os
from urllib.parse import quote_plus
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import AliasChoices, Field, field_validator


class Settings(BaseSettings):
    # metadata database (PostgreSQL)
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "vfs"
    db_user: str = "vfs"
    db_password: str = ""
    # full URL wins over the parts above (ex.: sqlite:///vfs.db)
    db_url: str | None = None
    # create tbVfsFolders/tbVfsFiles on startup (dev / sqlite)
    db_create_schema: bool = False

    environment: str = "development"
    debug: bool = False

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str | None = None

    # Ex: "http://localhost:5173,http://127.0.0.1:5173"
    cors_origins_raw: str = Field(default="", validation_alias=AliasChoices("cors_origins", "cors_origins_raw"))

    vfs_max_file_size: int = int(os.getenv("VFS_MAX_FILE_SIZE", str(32 * 1024 * 1024)))
    vfs_path: str = os.getenv("VFS_PATH", "./_vfs")
    vfs_web_path: str = os.getenv("VFS_WEB_PATH", "/media/")
    # non-public namespaces, comma separated. Ex: "avatars,banners"
    vfs_namespaces_raw: str = Field(default="", validation_alias=AliasChoices("vfs_namespaces", "vfs_namespaces_raw"))
    vfs_upload_form_name: str = os.getenv("VFS_UPLOAD_FORM_NAME", "file")
    vfs_salted_filenames: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("db_host", "db_name", "db_user", "db_password", mode="before")
    @classmethod
    def strip_strings(cls, v):
        if isinstance(v, str):
            return v.strip().strip('"').strip("'")
        return v

    @property
    def database_url(self) -> str:
        if self.db_url:
            return self.db_url

        user = quote_plus(self.db_user)
        password = quote_plus(self.db_password)
        host = self.db_host
        port = self.db_port
        db = self.db_name

        return f"postgresql+psycopg2://{user}:{password}@{host}:{port}/{db}"

    @property
    def vfs_namespaces(self) -> tuple[str, ...]:
        return _split_csv(self.vfs_namespaces_raw)

    @property
    def cors_origins(self) -> list[str]:
        return list(_split_csv(self.cors_origins_raw))


def _split_csv(raw: str | None) -> tuple[str, ...]:
    raw = (raw or "").strip()
    if not raw:
        return ()
    parts = [p.strip() for p in raw.split(",")]
    return tuple(p for p in parts if p)


settings = Settings()
