"""Shared fixtures: runtime dir isolation."""
import pytest

from media_control import config


@pytest.fixture
def runtime_dir(tmp_path, monkeypatch):
    monkeypatch.setenv(config.RUNTIME_DIR_ENV, str(tmp_path))
    return tmp_path


@pytest.fixture
def no_runtime_dir(monkeypatch):
    monkeypatch.delenv(config.RUNTIME_DIR_ENV, raising=False)
