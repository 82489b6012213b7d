from pathlib import Path

from filedemo.infra.config import Settings


def test_defaults(monkeypatch):
    for name in ("HOST", "PORT", "LOG_LEVEL", "FILES_MOUNT_PATH", "FILES_DIR", "FILE_ROOT"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.HOST == "0.0.0.0"
    assert settings.PORT == 3333
    assert settings.FILES_MOUNT_PATH == "/files"
    assert settings.FILES_DIR == "data"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("files_mount_path", "/static")
    settings = Settings(_env_file=None)
    assert settings.PORT == 8080
    assert settings.FILES_MOUNT_PATH == "/static"


def test_relative_files_dir_resolves_against_cwd(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    settings = Settings(_env_file=None, FILES_DIR="data")
    assert settings.files_root() == Path.cwd() / "data"


def test_absolute_files_dir_is_kept(tmp_path):
    settings = Settings(_env_file=None, FILES_DIR=str(tmp_path))
    assert settings.files_root() == tmp_path
