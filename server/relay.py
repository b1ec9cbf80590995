"""Background NMEA reading loop."""

import asyncio
import logging

from nmea0183 import NMEAReader
from server.broadcaster import broadcast_message
from server.formatters import format_sentence_message

__all__ = ["run_nmea_loop"]

logger = logging.getLogger(__name__)


def run_nmea_loop(loop: asyncio.AbstractEventLoop, reader: NMEAReader) -> None:
    """Read decoded sentences continuously and broadcast them to the event loop.

    The caller owns *reader* and must use it as an open context manager. The
    loop exits when ``reader.cancel()`` is called, which causes the underlying
    ``NMEAReader.read()`` to raise ``EOFError``.

    Args:
        loop: Running asyncio event loop to broadcast messages on.
        reader: An open ``NMEAReader`` instance managed by the caller.
    """
    try:
        for sentence in reader:
            message = format_sentence_message(sentence)
            broadcast_message(message, loop)
    except EOFError:
        logger.info("NMEA stream closed")
        return
