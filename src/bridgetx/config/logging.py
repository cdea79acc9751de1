"""Logging setup for the bridgetx CLI."""

from __future__ import annotations

import logging

# client libraries that log every request or RPC call at INFO/DEBUG
CHATTY_LOGGERS: tuple[str, ...] = ("httpx", "httpcore", "web3", "aiohttp", "urllib3")


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Configure the root logger with a terse CLI format.

    Below DEBUG, the transport libraries in ``CHATTY_LOGGERS`` are held at
    WARNING so a listing is not buried under per-request lines. Pass
    ``force=True`` to replace handlers installed earlier.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    library_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)
