"""Thin asyncio adapter over python-mpd2, exposing what the controller consumes."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import suppress
import logging
from typing import Any

from mpd import CommandError, MPDError
from mpd.asyncio import MPDClient

from .const import IDLE_SUBSYSTEM, KEEPALIVE_INTERVAL, MPD_HOST, MPD_PORT
from .errors import PlayerError
from .models import PlayerStatus


class MpdPlayer:
    """Connection to the Music Player Daemon."""

    def __init__(
        self,
        host: str = MPD_HOST,
        port: int = MPD_PORT,
        password: str | None = None,
        keepalive_interval: float = KEEPALIVE_INTERVAL,
    ) -> None:
        """Initialize the MPD adapter."""
        self.logger = logging.getLogger(__name__)
        self.host = host
        self.port = port
        self.password = password
        self.keepalive_interval = keepalive_interval
        self._client: MPDClient | None = None

    async def connect(self) -> None:
        """Open a fresh connection to MPD."""
        self.disconnect()
        client = MPDClient()
        try:
            await client.connect(self.host, self.port)
            if self.password:
                await client.password(self.password)
        except (MPDError, OSError) as err:
            with suppress(MPDError, OSError):
                client.disconnect()
            raise PlayerError(str(err)) from err
        self._client = client
        self.logger.info("Connected to MPD at %s:%s", self.host, self.port)

    def disconnect(self) -> None:
        """Close the MPD connection, if any."""
        client, self._client = self._client, None
        if client is None:
            return
        with suppress(MPDError, OSError):
            client.disconnect()

    async def status(self) -> PlayerStatus:
        """Return the current playback status."""
        return PlayerStatus.from_mpd(await self._call("status"))

    async def wait_for_change(self) -> list[str]:
        """
        Block until MPD reports a change of the player subsystem.

        Each wait subscribes to idle anew, changes made while nobody waits stay
        pending on the server and are reported merged in a single wake-up.
        The wait has no timeout. MPD's idle doesn't notice a dropped connection
        so we ping while waiting, which raises once the connection is gone.
        """
        changes = self._require_client().idle([IDLE_SUBSYSTEM])
        next_change = asyncio.create_task(self._get_next_change(changes))
        try:
            while True:
                done, _ = await asyncio.wait(
                    {next_change},
                    timeout=self.keepalive_interval,
                )
                if done:
                    break
                await self._call("ping")
            try:
                return next_change.result()
            except (MPDError, OSError, StopAsyncIteration) as err:
                raise PlayerError(str(err) or "Connection lost") from err
        finally:
            if not next_change.done():
                next_change.cancel()
                await asyncio.wait({next_change})
            await changes.aclose()

    async def stop(self) -> None:
        """Stop playback."""
        await self._call("stop")

    async def pause(self) -> None:
        """Pause playback."""
        await self._call("pause", 1)

    async def seek(self, elapsed: float) -> None:
        """Seek to a position (in seconds) within the current song."""
        await self._call("seekcur", elapsed)

    async def play(self) -> None:
        """Start or resume playback."""
        await self._call("play")

    async def current_song_uri(self) -> str | None:
        """Return the URI of the current song, if any."""
        try:
            song = await self._call("currentsong", expect_errors=True)
        except CommandError:
            return None
        return song.get("file") if song else None

    async def supports_command(self, name: str) -> bool:
        """Return if MPD allows us to use the given command."""
        return name in await self._call("commands")

    async def read_sticker(self, uri: str, name: str) -> str | None:
        """Return the value of a song sticker, None if it isn't set."""
        try:
            value = await self._call(
                "sticker_get",
                "song",
                uri,
                name,
                expect_errors=True,
            )
        except CommandError:
            # MPD reports a missing sticker as an error
            return None
        if isinstance(value, list):
            return value[0] if value else None
        return value or None

    async def _get_next_change(self, changes: AsyncIterator[list[str]]) -> list[str]:
        return await anext(changes)

    async def _call(self, command: str, *args: Any, expect_errors: bool = False) -> Any:
        """Run a MPD command, raising PlayerError on any failure."""
        client = self._require_client()
        self.logger.debug("MPD command: %s %s", command, args)
        try:
            return await getattr(client, command)(*args)
        except CommandError as err:
            if expect_errors:
                raise
            raise PlayerError(str(err)) from err
        except (MPDError, OSError) as err:
            raise PlayerError(str(err)) from err

    def _require_client(self) -> MPDClient:
        if self._client is None:
            raise PlayerError("Not connected to MPD")
        return self._client
