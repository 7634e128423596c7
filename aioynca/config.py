"""
Configuration loader for mpd-ynca.

The configuration is a TOML file with top-level keys, e.g.:

    host = "receiver.lan"
    input = "AUDIO1"
    scene = "Scene 1"
    default_program = "7ch Stereo"

Search order when no path is given:
  1. $XDG_CONFIG_HOME/mpd/ynca.toml  (~/.config/mpd/ynca.toml)
  2. ~/.mpd-ynca.toml
  3. /etc/mpd-ynca.toml

MPD's address falls back to the MPD_HOST and MPD_PORT environment variables,
MPD_HOST may carry a password as password@host.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
import tomllib
from typing import Any

from .const import (
    CONFIG_NAME,
    DEFAULT_STARTUP_DELAY,
    DEFAULT_ZONE,
    HOME_CONFIG_NAME,
    MPD_HOST,
    MPD_PORT,
    SYSTEM_CONFIG_PATH,
    YNCA_PORT,
)
from .errors import ConfigError
from .models import SessionParameters

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("host", "input", "scene")


def get_search_paths() -> list[Path]:
    """Return the config file locations, in order of preference."""
    if xdg_config := os.environ.get("XDG_CONFIG_HOME"):
        config_dir = Path(xdg_config)
    else:
        config_dir = Path.home() / ".config"
    return [
        config_dir / "mpd" / CONFIG_NAME,
        Path.home() / HOME_CONFIG_NAME,
        Path(SYSTEM_CONFIG_PATH),
    ]


def find_config_file() -> Path:
    """Return the first config file that exists."""
    for path in get_search_paths():
        if path.exists():
            return path
    raise ConfigError("Could not find a configuration file.")


def mpd_address_from_env() -> tuple[str, int, str | None]:
    """Return MPD host, port and password from the environment."""
    host = os.environ.get("MPD_HOST") or MPD_HOST
    password = None
    if "@" in host and not host.startswith("@"):
        # password@host, a leading @ denotes an abstract socket
        password, host = host.split("@", 1)
    try:
        port = int(os.environ.get("MPD_PORT") or MPD_PORT)
    except ValueError:
        port = MPD_PORT
    return (host, port, password)


def _get(
    data: dict[str, Any],
    key: str,
    kind: type | tuple[type, ...],
    path: Path,
) -> Any:
    """Return an optional value from the config, checking its type."""
    value = data.get(key)
    if value is not None and (not isinstance(value, kind) or isinstance(value, bool)):
        msg = f"Invalid value for {key} in {path}: {value!r}"
        raise ConfigError(msg)
    return value


def load_config(path: Path | None = None) -> SessionParameters:
    """
    Load the session parameters from a TOML file.

    Args:
        path: The config file. If None, the search paths are tried.

    Returns:
        The loaded SessionParameters.
    """
    if path is None:
        path = find_config_file()

    logger.debug("Loading config from %s", path)
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except OSError as err:
        msg = f"Could not open {path}: {err.strerror or err}"
        raise ConfigError(msg) from err
    except tomllib.TOMLDecodeError as err:
        msg = f"Invalid configuration in {path}: {err}"
        raise ConfigError(msg) from err

    for key in REQUIRED_KEYS:
        if not _get(data, key, str, path):
            msg = f"{key} not set in {path}."
            raise ConfigError(msg)

    env_host, env_port, env_password = mpd_address_from_env()
    port = _get(data, "port", int, path)
    startup_delay = _get(data, "startup_delay", (int, float), path)
    mpd_port = _get(data, "mpd_port", int, path)
    return SessionParameters(
        host=data["host"],
        input=data["input"],
        scene=data["scene"],
        port=YNCA_PORT if port is None else port,
        default_program=_get(data, "default_program", str, path) or None,
        startup_delay=(
            DEFAULT_STARTUP_DELAY if startup_delay is None else float(startup_delay)
        ),
        zone=_get(data, "zone", str, path) or DEFAULT_ZONE,
        mpd_host=_get(data, "mpd_host", str, path) or env_host,
        mpd_port=env_port if mpd_port is None else mpd_port,
        mpd_password=_get(data, "mpd_password", str, path) or env_password,
    )
