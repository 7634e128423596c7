"""Models used by the controller and the receiver client."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .const import DEFAULT_STARTUP_DELAY, DEFAULT_ZONE, MPD_HOST, MPD_PORT, YNCA_PORT
from .util import CRLF, parse_channels, parse_elapsed, ynca_command


class PlaybackState(Enum):
    """Enum with the possible playback states of MPD."""

    STOPPED = "stop"
    PAUSED = "pause"
    PLAYING = "play"
    UNKNOWN = "unknown"

    @classmethod
    def from_mpd(cls, value: str | None) -> PlaybackState:
        """Return the state for MPD's status value."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class PlayerStatus:
    """Snapshot of the MPD status fields we act on."""

    state: PlaybackState
    elapsed: float = 0.0
    channels: int = 0

    @classmethod
    def from_mpd(cls, status: dict[str, str]) -> PlayerStatus:
        """Create PlayerStatus from the dict returned by MPD's status command."""
        return cls(
            state=PlaybackState.from_mpd(status.get("state")),
            elapsed=parse_elapsed(status.get("elapsed")),
            channels=parse_channels(status.get("audio")),
        )


@dataclass(frozen=True)
class SessionParameters:
    """Settings for one mpd-ynca process, immutable once loaded."""

    host: str
    input: str
    scene: str
    port: int = YNCA_PORT
    default_program: str | None = None
    startup_delay: float = DEFAULT_STARTUP_DELAY
    zone: str = DEFAULT_ZONE
    mpd_host: str = MPD_HOST
    mpd_port: int = MPD_PORT
    mpd_password: str | None = None


@dataclass(frozen=True)
class ReceiverCommands:
    """The YNCA command lines used by the controller."""

    zone: str
    power_query: str
    power_on: str
    power_on_reply: str
    scene_select: str
    input_query: str
    input_reply: str
    straight_on: str

    @classmethod
    def from_params(cls, params: SessionParameters) -> ReceiverCommands:
        """Build the command set for the configured zone, scene and input."""
        zone = params.zone
        power_on = ynca_command(zone, "PWR", "On")
        return cls(
            zone=zone,
            power_query=ynca_command(zone, "PWR", "?"),
            power_on=power_on,
            power_on_reply=power_on + CRLF,
            scene_select=ynca_command(zone, "SCENE", params.scene),
            input_query=ynca_command(zone, "INP", "?"),
            input_reply=ynca_command(zone, "INP", params.input) + CRLF,
            straight_on=ynca_command(zone, "STRAIGHT", "On"),
        )

    def sound_program(self, name: str) -> str:
        """Return the command selecting the given sound program."""
        return ynca_command(self.zone, "SOUNDPRG", name)
