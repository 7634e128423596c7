"""Tests for models and helpers."""

import pytest

from aioynca import util
from aioynca.models import (
    PlaybackState,
    PlayerStatus,
    ReceiverCommands,
    SessionParameters,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("play", PlaybackState.PLAYING),
        ("pause", PlaybackState.PAUSED),
        ("stop", PlaybackState.STOPPED),
        ("rewinding", PlaybackState.UNKNOWN),
        (None, PlaybackState.UNKNOWN),
    ],
)
def test_playback_state_from_mpd(value, expected):
    """Test mapping MPD's state field."""
    assert PlaybackState.from_mpd(value) is expected


def test_player_status_from_mpd():
    """Test parsing the MPD status dict."""
    status = PlayerStatus.from_mpd(
        {"state": "pause", "elapsed": "61.250", "audio": "96000:24:6"},
    )
    assert status == PlayerStatus(PlaybackState.PAUSED, 61.25, 6)

    status = PlayerStatus.from_mpd({"state": "stop"})
    assert status == PlayerStatus(PlaybackState.STOPPED, 0.0, 0)


@pytest.mark.parametrize(
    ("audio", "channels"),
    [
        ("44100:16:2", 2),
        ("48000:f:8", 8),
        ("dsd64:2", 2),
        ("44100:16:*", 0),
        ("2", 0),
        ("", 0),
        (None, 0),
    ],
)
def test_parse_channels(audio, channels):
    """Test parsing the channel count from the audio format."""
    assert util.parse_channels(audio) == channels


def test_parse_elapsed():
    """Test parsing elapsed seconds."""
    assert util.parse_elapsed("12.5") == 12.5
    assert util.parse_elapsed("n/a") == 0.0
    assert util.parse_elapsed(None) == 0.0


def test_encode_command():
    """Test commands are CRLF terminated ASCII."""
    assert util.encode_command("@MAIN:PWR=?") == b"@MAIN:PWR=?\r\n"


def test_receiver_commands():
    """Test the command set built from the session parameters."""
    params = SessionParameters(host="receiver", input="AV4", scene="Scene 3")
    commands = ReceiverCommands.from_params(params)
    assert commands.power_query == "@MAIN:PWR=?"
    assert commands.power_on == "@MAIN:PWR=On"
    assert commands.power_on_reply == "@MAIN:PWR=On\r\n"
    assert commands.scene_select == "@MAIN:SCENE=Scene 3"
    assert commands.input_query == "@MAIN:INP=?"
    assert commands.input_reply == "@MAIN:INP=AV4\r\n"
    assert commands.straight_on == "@MAIN:STRAIGHT=On"
    assert commands.sound_program("Chamber") == "@MAIN:SOUNDPRG=Chamber"
