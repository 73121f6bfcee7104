import pytest

from media_control import config
from media_control.errors import ConfigError


def test_last_player_file_lives_in_runtime_dir(runtime_dir):
    assert config.get_runtime_dir() == runtime_dir
    assert config.last_player_file_path() == runtime_dir / "media_control_last_player_file"


def test_blank_runtime_dir_counts_as_missing(monkeypatch):
    monkeypatch.setenv(config.RUNTIME_DIR_ENV, "  ")
    assert config.get_runtime_dir() is None
    with pytest.raises(ConfigError):
        config.last_player_file_path()


def test_defaults():
    assert config.RUNTIME_DIR_ENV == "XDG_RUNTIME_DIR"
    assert config.TRANSPORT_TIMEOUT_MS < config.PLAYER_SWITCH_TIMEOUT_MS
