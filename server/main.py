"""FastAPI web server relaying decoded NMEA sentences over WebSocket.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

WebSocket clients connect to ``ws://<host>:8000/ws`` and receive a stream
of JSON messages, one ``type="nmea"`` message per sentence gpsd forwards
from the receiver. Sentences that fail to decode are logged and skipped.
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager

from fastapi import FastAPI, WebSocket, WebSocketDisconnect

from nmea0183 import NMEAReader
from server.broadcaster import add_subscriber, remove_subscriber
from server.relay import run_nmea_loop

logger = logging.getLogger(__name__)

_QUEUE_MAX_SIZE = 10
_TIMEOUT_SECONDS = 5.0


async def _send_messages_until_disconnect(
    queue: asyncio.Queue[str],
    websocket: WebSocket,
) -> None:
    try:
        while True:
            message = await asyncio.wait_for(queue.get(), timeout=_TIMEOUT_SECONDS)
            await websocket.send_text(message)
    except TimeoutError:
        logger.info("No sentence for %.1f s, closing WebSocket", _TIMEOUT_SECONDS)
        await websocket.close(code=1001)
    except WebSocketDisconnect:
        pass


@asynccontextmanager
async def _lifespan(_application: FastAPI) -> AsyncIterator[None]:
    loop = asyncio.get_running_loop()
    executor = ThreadPoolExecutor(max_workers=1)
    with NMEAReader() as reader:
        future = loop.run_in_executor(executor, run_nmea_loop, loop, reader)
        try:
            yield
        finally:
            reader.cancel()
            await future
            executor.shutdown(wait=False)


app = FastAPI(lifespan=_lifespan)


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Stream decoded NMEA sentences as JSON to a connected WebSocket client.

    Each client gets its own bounded queue (max ``_QUEUE_MAX_SIZE`` messages).
    The oldest message is dropped when the queue is full so slow clients do
    not stall the reader thread. The connection closes with code 1001, and
    the client should reconnect, if no message arrives within
    ``_TIMEOUT_SECONDS``.

    Args:
        websocket: The incoming WebSocket connection.
    """
    queue: asyncio.Queue[str] = asyncio.Queue(maxsize=_QUEUE_MAX_SIZE)
    add_subscriber(queue)
    try:
        await websocket.accept()
        await _send_messages_until_disconnect(queue, websocket)
    finally:
        remove_subscriber(queue)
