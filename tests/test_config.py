"""Tests for FileStoreSettings."""

import pytest
from pydantic import ValidationError

from file_store import FileStoreConfigError, FileStoreSettings


def test_defaults():
    settings = FileStoreSettings(root_path="/var/cache")
    assert settings.folder_name == "file_store"
    assert settings.serializer == "json"
    assert settings.dir_mode == 0o770


def test_empty_root_rejected():
    with pytest.raises(ValidationError):
        FileStoreSettings(root_path="  ")


def test_mode_out_of_range():
    with pytest.raises(ValidationError):
        FileStoreSettings(root_path="/var/cache", dir_mode=0o10000)


def test_from_env(monkeypatch):
    monkeypatch.setenv("FILE_STORE_ROOT_PATH", "/srv/data")
    monkeypatch.setenv("FILE_STORE_FOLDER", "sessions")
    monkeypatch.setenv("FILE_STORE_SERIALIZER", "pickle")
    monkeypatch.setenv("FILE_STORE_DIR_MODE", "750")

    settings = FileStoreSettings.from_env()
    assert settings.root_path == "/srv/data"
    assert settings.folder_name == "sessions"
    assert settings.serializer == "pickle"
    assert settings.dir_mode == 0o750


def test_from_env_custom_prefix(monkeypatch):
    monkeypatch.setenv("APP_CACHE_ROOT_PATH", "/srv/app")
    settings = FileStoreSettings.from_env(prefix="APP_CACHE_")
    assert settings.root_path == "/srv/app"
    assert settings.folder_name == "file_store"


def test_from_env_missing_root(monkeypatch):
    monkeypatch.delenv("FILE_STORE_ROOT_PATH", raising=False)
    with pytest.raises(FileStoreConfigError, match="root_path"):
        FileStoreSettings.from_env()


def test_from_env_bad_mode(monkeypatch):
    monkeypatch.setenv("FILE_STORE_ROOT_PATH", "/srv/data")
    monkeypatch.setenv("FILE_STORE_DIR_MODE", "rwx")
    with pytest.raises(FileStoreConfigError, match="dir_mode"):
        FileStoreSettings.from_env()
