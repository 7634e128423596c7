"""Helpers and utils."""

from __future__ import annotations

import socket

from .const import READ_CHUNK_SIZE

CRLF = "\r\n"


def ynca_command(zone: str, parameter: str, value: str) -> str:
    """Build a YNCA command line (without line terminator)."""
    return f"@{zone}:{parameter}={value}"


def encode_command(command: str) -> bytes:
    """Encode a YNCA command for the wire."""
    return (command + CRLF).encode("ascii")


def parse_channels(audio: str | None) -> int:
    """
    Parse the channel count from MPD's audio format string.

    MPD reports the format as samplerate:bits:channels (e.g. 44100:24:2),
    DSD streams omit the bits (e.g. dsd64:2).
    """
    if not audio:
        return 0
    channels = audio.rsplit(":", 1)[-1]
    if not channels.isdigit() or ":" not in audio:
        return 0
    return int(channels)


def parse_elapsed(elapsed: str | None) -> float:
    """Parse elapsed seconds from MPD status, 0.0 if absent."""
    if not elapsed:
        return 0.0
    try:
        return float(elapsed)
    except ValueError:
        return 0.0


def read_available(sock: socket.socket) -> bytes:
    """Read everything currently buffered on a non-blocking socket."""
    chunks = []
    while True:
        try:
            data = sock.recv(READ_CHUNK_SIZE)
        except BlockingIOError:
            break
        if not data:
            # peer closed the connection, nothing more will arrive
            break
        chunks.append(data)
    return b"".join(chunks)
