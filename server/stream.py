"""Background loop that relays decoded gpsd sentences to subscribers."""

import asyncio
import logging

from gpsnmea.gnss import NMEAReader
from server.broadcaster import broadcast_sample

__all__ = ["run_nmea_loop"]

logger = logging.getLogger(__name__)


def run_nmea_loop(loop: asyncio.AbstractEventLoop, gnss: NMEAReader) -> None:
    """Read decoded sentences continuously and broadcast them as JSON.

    The caller owns *gnss* and must use it as an open context manager. The
    loop exits when ``gnss.cancel()`` is called, which causes the underlying
    ``NMEAReader.read()`` to raise ``EOFError``.

    Args:
        loop: Running asyncio event loop to broadcast messages on.
        gnss: An open ``NMEAReader`` instance managed by the caller.
    """
    try:
        for sample in gnss:
            broadcast_sample(sample, loop)
    except EOFError:
        logger.info("NMEA stream closed")
