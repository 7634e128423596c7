"""Constants for mpd-ynca."""

from __future__ import annotations

YNCA_PORT = 50000
DEFAULT_ZONE = "MAIN"

# the YNCA docs ask for at least 100ms between commands, 200ms proved reliable
SETTLE_INTERVAL = 0.2
CONNECT_TIMEOUT = 10
READ_CHUNK_SIZE = 4096

MPD_HOST = "localhost"
MPD_PORT = 6600
IDLE_SUBSYSTEM = "player"
KEEPALIVE_INTERVAL = 30
RETRY_INTERVAL = 1

DEFAULT_STARTUP_DELAY = 5.0
STICKER_COMMAND = "sticker"
STICKER_NAME = "ynca_program"

CONFIG_NAME = "ynca.toml"
HOME_CONFIG_NAME = ".mpd-ynca.toml"
SYSTEM_CONFIG_PATH = "/etc/mpd-ynca.toml"
