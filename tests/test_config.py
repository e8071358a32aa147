from vfs.config.settings import Settings
from vfs.infrastructure.storage.vfs_config import VfsConfig


def test_public_namespace_is_always_valid():
    config = VfsConfig(max_file_size=10, path="/tmp")
    assert config.is_valid_namespace("")


def test_namespace_allow_list():
    config = VfsConfig(max_file_size=10, path="/tmp", namespaces=("avatars", "banners"))
    assert config.is_valid_namespace("avatars")
    assert config.is_valid_namespace("banners")
    assert not config.is_valid_namespace("other")
    assert not config.is_valid_namespace("Avatars")


def test_empty_form_name_falls_back_to_file():
    config = VfsConfig(max_file_size=10, path="/tmp", upload_form_name="")
    assert config.upload_form_name == "file"


def test_namespaces_are_frozen_as_tuple():
    config = VfsConfig(max_file_size=10, path="/tmp", namespaces=["a", "b"])
    assert config.namespaces == ("a", "b")


def test_settings_split_namespaces_and_build_config():
    settings = Settings(
        vfs_namespaces_raw=" avatars, ,banners ",
        vfs_path="/data/vfs",
        vfs_web_path="/static/",
        vfs_max_file_size=100,
        vfs_salted_filenames=True,
    )
    config = VfsConfig.from_settings(settings)

    assert config.namespaces == ("avatars", "banners")
    assert config.path == "/data/vfs"
    assert config.web_path == "/static/"
    assert config.max_file_size == 100
    assert config.salted_filenames is True


def test_database_url_override_and_default():
    assert Settings(db_url="sqlite://").database_url == "sqlite://"

    url = Settings(db_user="u s", db_password="p@ss", db_host="db", db_port=5433, db_name="vfs").database_url
    assert url == "postgresql+psycopg2://u+s:p%40ss@db:5433/vfs"


def test_settings_read_documented_keys_from_env_file(tmp_path, monkeypatch):
    for key in ("VFS_NAMESPACES", "VFS_NAMESPACES_RAW", "CORS_ORIGINS", "CORS_ORIGINS_RAW", "VFS_PATH"):
        monkeypatch.delenv(key, raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text(
        "VFS_NAMESPACES=avatars,banners\n"
        "CORS_ORIGINS=http://localhost:5173, http://127.0.0.1:5173\n"
        "VFS_PATH=/srv/vfs\n"
    )

    settings = Settings(_env_file=str(env_file))

    assert settings.vfs_namespaces == ("avatars", "banners")
    assert settings.cors_origins == ["http://localhost:5173", "http://127.0.0.1:5173"]
    assert settings.vfs_path == "/srv/vfs"
