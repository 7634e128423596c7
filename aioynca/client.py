"""
Socketclient implementation for the Yamaha Network Control API (YNCA).

YNCA is a line based protocol (@ZONE:PARAMETER=VALUE terminated by CRLF) without
any message framing. The receiver broadcasts status lines whenever something
changes, so a reply can't be told apart from unsolicited output other than by
its content. Replies are therefore collected until the socket goes silent.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from contextlib import suppress
import logging
import socket
from types import TracebackType
from typing import Self

from async_timeout import timeout

from .const import CONNECT_TIMEOUT, SETTLE_INTERVAL, YNCA_PORT
from .errors import CannotConnect, NotConnected, ReceiverError
from .util import encode_command, read_available


class YncaClient:
    """YNCA socket client, holding at most one connection to the receiver."""

    def __init__(
        self,
        host: str,
        port: int = YNCA_PORT,
        settle_interval: float = SETTLE_INTERVAL,
        connect_timeout: float = CONNECT_TIMEOUT,
    ) -> None:
        """
        Initialize the receiver client.

        Params:
        - host: Hostname or IP address of the receiver.
        - port: The YNCA port, default is 50000.
        - settle_interval: Time to wait after each command and the period of
          silence that ends a reply.
        - connect_timeout: Give up connecting after this many seconds.
        """
        self.logger = logging.getLogger(__name__)
        self.host = host
        self.port = port
        self.settle_interval = settle_interval
        self.connect_timeout = connect_timeout
        self._sock: socket.socket | None = None

    @property
    def connected(self) -> bool:
        """Return connection state of the socket."""
        return self._sock is not None

    async def connect(self) -> None:
        """Resolve the receiver address and open the connection."""
        self.disconnect()
        loop = asyncio.get_running_loop()
        last_err: Exception | None = None
        try:
            async with timeout(self.connect_timeout):
                addresses = await loop.getaddrinfo(
                    self.host,
                    self.port,
                    type=socket.SOCK_STREAM,
                )
                for family, sock_type, proto, _, address in addresses:
                    sock = None
                    try:
                        sock = socket.socket(family, sock_type, proto)
                        sock.setblocking(False)
                        await loop.sock_connect(sock, address)
                    except OSError as err:
                        if sock is not None:
                            sock.close()
                        last_err = err
                        continue
                    except BaseException:
                        if sock is not None:
                            sock.close()
                        raise
                    self._sock = sock
                    break
        except (OSError, TimeoutError) as err:
            msg = f"Unable to connect to {self.host}:{self.port}: {err}"
            raise CannotConnect(msg) from err
        if self._sock is None:
            msg = f"Unable to connect to {self.host}:{self.port}: {last_err}"
            raise CannotConnect(msg) from last_err
        self.logger.debug("Connected to receiver %s:%s", self.host, self.port)

    def disconnect(self) -> None:
        """Close the connection, if any."""
        sock, self._sock = self._sock, None
        if sock is None:
            return
        with suppress(OSError):
            sock.close()
        self.logger.debug("Disconnected from receiver %s:%s", self.host, self.port)

    async def send_directive(self, command: str) -> None:
        """Send a command without waiting for any reply."""
        await self._write(command)
        await asyncio.sleep(self.settle_interval)

    async def send_query(self, command: str) -> str:
        """
        Send a command and return everything the receiver sent back.

        The reply is considered complete once a full settle interval passes
        without any data arriving. The result may contain unrelated status
        lines, callers have to look for the line they expect.
        """
        sock = self._require_socket()
        stale = read_available(sock)
        if stale:
            self.logger.debug("Discarded unsolicited output: %r", stale)

        await self._write(command)
        response = b""
        while True:
            await asyncio.sleep(self.settle_interval)
            data = read_available(sock)
            if not data:
                break
            response += data
        self.logger.debug("Received response to %s: %r", command, response)
        return response.decode("ascii", errors="replace")

    async def with_connection(self, action: Callable[[], Awaitable[None]]) -> bool:
        """
        Run action while connected to the receiver.

        The connection is closed on every path. Receiver errors are logged and
        swallowed, False is returned in that case.
        """
        try:
            await self.connect()
            await action()
        except CannotConnect as err:
            self.logger.error("%s", err)
            return False
        except (ReceiverError, OSError) as err:
            self.logger.error("Receiver %s:%s: %s", self.host, self.port, err)
            return False
        finally:
            self.disconnect()
        return True

    async def _write(self, command: str) -> None:
        """Write a single command line to the socket."""
        sock = self._require_socket()
        self.logger.debug("Sending command: %s", command)
        await asyncio.get_running_loop().sock_sendall(sock, encode_command(command))

    def _require_socket(self) -> socket.socket:
        if self._sock is None:
            msg = f"Not connected to {self.host}:{self.port}"
            raise NotConnected(msg)
        return self._sock

    async def __aenter__(self) -> Self:
        """Return Context manager."""
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit context manager."""
        self.disconnect()
