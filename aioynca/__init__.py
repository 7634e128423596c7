"""Control a Yamaha AV receiver (YNCA) from the Music Player Daemon."""

from .client import YncaClient
from .controller import PlaybackController
from .models import PlaybackState, SessionParameters
from .player import MpdPlayer

__all__ = [
    "MpdPlayer",
    "PlaybackController",
    "PlaybackState",
    "SessionParameters",
    "YncaClient",
]
