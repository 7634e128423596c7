"""State machine driving the receiver from MPD playback state changes."""

from __future__ import annotations

import asyncio
from functools import partial
import logging

from .client import YncaClient
from .const import RETRY_INTERVAL, STICKER_COMMAND, STICKER_NAME
from .errors import PlayerError
from .models import PlaybackState, PlayerStatus, ReceiverCommands, SessionParameters
from .player import MpdPlayer


class PlaybackController:
    """Turn the receiver on and set it up whenever MPD starts playing."""

    def __init__(
        self,
        params: SessionParameters,
        player: MpdPlayer | None = None,
        receiver: YncaClient | None = None,
        retry_interval: float = RETRY_INTERVAL,
    ) -> None:
        """
        Initialize the controller.

        Params:
        - params: The session parameters (receiver, scene, input, programs).
        - player: Optionally provide the MPD adapter, built from params if omitted.
        - receiver: Optionally provide the receiver client, built from params if omitted.
        - retry_interval: Seconds to wait before reconnecting after a MPD error.
        """  # noqa: E501
        self.logger = logging.getLogger(__name__)
        self.params = params
        self.player = player or MpdPlayer(
            params.mpd_host,
            params.mpd_port,
            params.mpd_password,
        )
        self.receiver = receiver or YncaClient(params.host, params.port)
        self.retry_interval = retry_interval
        self.commands = ReceiverCommands.from_params(params)
        self.sticker_support = False
        self.previous_state = PlaybackState.UNKNOWN

    async def run(self) -> None:
        """Keep controlling the receiver, reconnecting to MPD on errors."""
        while True:
            try:
                await self.start()
                while True:
                    await self.step()
            except PlayerError as err:
                self.logger.error("MPD connection error: %s", err)
            finally:
                self.player.disconnect()
            await asyncio.sleep(self.retry_interval)

    async def start(self) -> None:
        """Connect to MPD and pick up the initial playback state."""
        await self.player.connect()
        self.sticker_support = False
        if self.params.default_program is not None:
            self.sticker_support = await self.player.supports_command(STICKER_COMMAND)
            if not self.sticker_support:
                self.logger.warning(
                    "Server lacks 'sticker' command, ignoring per-song sound programs. "
                    "SQLite is not enabled in the build or 'sticker_file' is not set.",
                )
        status = await self.player.status()
        self.previous_state = status.state

    async def step(self) -> None:
        """Wait for the next player change and act on it."""
        await self.player.wait_for_change()
        status = await self.player.status()
        self.logger.debug(
            "Playback state %s -> %s",
            self.previous_state.value,
            status.state.value,
        )
        if status.state == PlaybackState.PLAYING:
            await self.receiver.with_connection(partial(self._handle_playing, status))
        self.previous_state = status.state

    async def _handle_playing(self, status: PlayerStatus) -> None:
        """Send the receiver commands for a (still) playing player."""
        commands = self.commands
        if self.previous_state != PlaybackState.PLAYING:
            response = await self.receiver.send_query(commands.power_query)
            powered = commands.power_on_reply in response
            if not powered:
                # hold playback back until the receiver is able to play it
                if self.previous_state == PlaybackState.PAUSED:
                    await self.player.pause()
                    await self.player.seek(status.elapsed)
                else:
                    await self.player.stop()
                self.logger.info("Powering on receiver %s", self.params.host)
                await self.receiver.send_directive(commands.power_on)
            await self.receiver.send_directive(commands.scene_select)
            if not powered:
                await asyncio.sleep(self.params.startup_delay)
                await self.player.play()
        else:
            response = await self.receiver.send_query(commands.input_query)
            if commands.input_reply not in response:
                self.logger.info(
                    "Receiver is no longer on input %s, stopping playback",
                    self.params.input,
                )
                await self.player.stop()
                return

        await self._select_sound_program(status)

    async def _select_sound_program(self, status: PlayerStatus) -> None:
        """Apply the song's sound program, straight mode or the default one."""
        if self.params.default_program is None:
            return
        program = await self._song_sound_program() if self.sticker_support else None
        if program:
            await self.receiver.send_directive(self.commands.sound_program(program))
        elif status.channels > 2:
            await self.receiver.send_directive(self.commands.straight_on)
        else:
            await self.receiver.send_directive(
                self.commands.sound_program(self.params.default_program),
            )

    async def _song_sound_program(self) -> str | None:
        """Return the sound program sticker of the current song, if any."""
        uri = await self.player.current_song_uri()
        if uri is None:
            return None
        return await self.player.read_sticker(uri, STICKER_NAME)

