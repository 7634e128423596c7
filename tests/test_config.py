"""Tests for the configuration loader."""

from __future__ import annotations

from pathlib import Path

import pytest

from aioynca import config
from aioynca.errors import ConfigError

MINIMAL = 'host = "receiver.lan"\ninput = "AUDIO1"\nscene = "Scene 1"\n'


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path: Path) -> None:
    """Isolate the tests from the user's environment."""
    monkeypatch.delenv("MPD_HOST", raising=False)
    monkeypatch.delenv("MPD_PORT", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))


def write(path: Path, text: str) -> Path:
    """Write a config file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


def test_load_minimal_config(tmp_path):
    """Test defaults are applied to a minimal config."""
    params = config.load_config(write(tmp_path / "ynca.toml", MINIMAL))
    assert params.host == "receiver.lan"
    assert params.input == "AUDIO1"
    assert params.scene == "Scene 1"
    assert params.port == 50000
    assert params.default_program is None
    assert params.startup_delay == 5.0
    assert params.zone == "MAIN"
    assert params.mpd_host == "localhost"
    assert params.mpd_port == 6600
    assert params.mpd_password is None


def test_load_full_config(tmp_path):
    """Test all settings are read."""
    text = MINIMAL + (
        "port = 50001\n"
        'default_program = "7ch Stereo"\n'
        "startup_delay = 3\n"
        'zone = "ZONE2"\n'
        'mpd_host = "music.lan"\n'
        "mpd_port = 6601\n"
        'mpd_password = "secret"\n'
    )
    params = config.load_config(write(tmp_path / "ynca.toml", text))
    assert params.port == 50001
    assert params.default_program == "7ch Stereo"
    assert params.startup_delay == 3.0
    assert params.zone == "ZONE2"
    assert params.mpd_host == "music.lan"
    assert params.mpd_port == 6601
    assert params.mpd_password == "secret"


@pytest.mark.parametrize("key", ["host", "input", "scene"])
def test_missing_required_key(tmp_path, key):
    """Test mandatory settings are enforced."""
    text = "\n".join(
        line for line in MINIMAL.splitlines() if not line.startswith(key)
    )
    path = write(tmp_path / "ynca.toml", text)
    with pytest.raises(ConfigError, match=f"{key} not set in"):
        config.load_config(path)


def test_invalid_value_type(tmp_path):
    """Test values of the wrong type are rejected."""
    path = write(tmp_path / "ynca.toml", MINIMAL + 'port = "fifty"\n')
    with pytest.raises(ConfigError, match="Invalid value for port"):
        config.load_config(path)


def test_invalid_toml(tmp_path):
    """Test a broken file is reported."""
    path = write(tmp_path / "ynca.toml", "host = \n")
    with pytest.raises(ConfigError, match="Invalid configuration"):
        config.load_config(path)


def test_unreadable_file(tmp_path):
    """Test a missing explicit path is reported."""
    with pytest.raises(ConfigError, match="Could not open"):
        config.load_config(tmp_path / "missing.toml")


def test_search_order(tmp_path):
    """Test the XDG location wins over the home directory."""
    home_file = write(tmp_path / "home" / ".mpd-ynca.toml", MINIMAL)
    assert config.find_config_file() == home_file

    xdg_file = write(tmp_path / "xdg" / "mpd" / "ynca.toml", MINIMAL)
    assert config.find_config_file() == xdg_file


def test_no_config_file(monkeypatch, tmp_path):
    """Test a missing configuration is reported."""
    monkeypatch.setattr(
        config,
        "get_search_paths",
        lambda: [tmp_path / "nope.toml"],
    )
    with pytest.raises(ConfigError, match="Could not find a configuration file"):
        config.load_config()


def test_mpd_address_from_env(monkeypatch, tmp_path):
    """Test MPD_HOST and MPD_PORT are used when not configured."""
    monkeypatch.setenv("MPD_HOST", "hunter2@music.lan")
    monkeypatch.setenv("MPD_PORT", "6601")
    params = config.load_config(write(tmp_path / "ynca.toml", MINIMAL))
    assert params.mpd_host == "music.lan"
    assert params.mpd_port == 6601
    assert params.mpd_password == "hunter2"


def test_mpd_abstract_socket_is_not_a_password(monkeypatch):
    """Test a leading @ is kept as part of the host."""
    monkeypatch.setenv("MPD_HOST", "@mpd")
    assert config.mpd_address_from_env() == ("@mpd", 6600, None)
