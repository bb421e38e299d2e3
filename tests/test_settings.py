from pathlib import Path

from imageserver.settings import ServerConfig

_VARS = [
    "IMAGE_SERVER_HOST",
    "IMAGE_SERVER_PORT",
    "IMAGE_ROOT",
    "REORDER_SUBDIR",
    "PUBLIC_BASE_URL",
    "MAX_UPLOAD_MB",
    "LOG_LEVEL",
]


def _clear_env(monkeypatch) -> None:
    # setenv first so values loaded from a .env file are undone afterwards.
    for name in _VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_from_env_defaults(tmp_path, monkeypatch) -> None:
    _clear_env(monkeypatch)
    config = ServerConfig.from_env(tmp_path / "missing.env")

    assert config.host == "127.0.0.1"
    assert config.port == 6969
    assert config.image_root == "./public"
    assert config.reorder_subdir == ""
    assert config.base_url == "http://localhost:6969"
    assert config.log_level == "INFO"


def test_from_env_reads_overrides(tmp_path, monkeypatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("IMAGE_SERVER_PORT", "8080")
    monkeypatch.setenv("IMAGE_ROOT", str(tmp_path))
    monkeypatch.setenv("REORDER_SUBDIR", "/gallery/")
    monkeypatch.setenv("PUBLIC_BASE_URL", "https://img.example.com/")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = ServerConfig.from_env(tmp_path / "missing.env")

    assert config.port == 8080
    assert config.image_root_path == Path(tmp_path).resolve()
    assert config.reorder_subdir == "gallery"
    assert config.base_url == "https://img.example.com"
    assert config.log_level == "DEBUG"


def test_from_env_loads_dotenv_file(tmp_path, monkeypatch) -> None:
    _clear_env(monkeypatch)
    env_file = tmp_path / ".env"
    env_file.write_text("IMAGE_SERVER_PORT=7000\nMAX_UPLOAD_MB=5\n")

    config = ServerConfig.from_env(env_file)

    assert config.port == 7000
    assert config.max_upload_mb == 5
