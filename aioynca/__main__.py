"""Run the MPD to YNCA bridge."""

from __future__ import annotations

import argparse
import asyncio
import contextlib
import logging
from pathlib import Path
import sys

from .config import load_config
from .controller import PlaybackController
from .errors import ConfigError

_LOGGER = logging.getLogger(__name__)


def main() -> None:
    """Parse arguments, load the configuration and run forever."""
    parser = argparse.ArgumentParser(
        prog="mpd-ynca",
        description="Control a Yamaha AV receiver from MPD playback state.",
    )
    parser.add_argument("--config", type=Path, help="Path to the configuration file")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)-15s %(levelname)-5s %(name)s -- %(message)s",
    )

    try:
        params = load_config(args.config)
    except ConfigError as err:
        print(err, file=sys.stderr)  # noqa: T201
        sys.exit(1)

    _LOGGER.info(
        "Controlling receiver %s:%s for MPD at %s:%s",
        params.host,
        params.port,
        params.mpd_host,
        params.mpd_port,
    )
    controller = PlaybackController(params)
    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(controller.run())


if __name__ == "__main__":
    main()
