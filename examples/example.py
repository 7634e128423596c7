"""mpd-ynca example: query the receiver directly."""

import asyncio
import contextlib
import logging

from aioynca import YncaClient

logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)-15s %(levelname)-5s %(name)s -- %(message)s",
)

LOGGER = logging.getLogger("example")


async def main() -> None:
    """Run code example."""
    async with YncaClient("192.168.1.50") as receiver:
        response = await receiver.send_query("@MAIN:PWR=?")
        LOGGER.info("Power state: %s", response.strip())
        response = await receiver.send_query("@MAIN:INP=?")
        LOGGER.info("Input: %s", response.strip())


with contextlib.suppress(KeyboardInterrupt):
    asyncio.run(main())
