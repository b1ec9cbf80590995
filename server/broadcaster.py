"""WebSocket subscriber queues and thread-safe sentence broadcasting.

The reader loop runs in a worker thread; every subscriber queue belongs to
the event loop. ``broadcast_message`` hands each message over with
``call_soon_threadsafe`` so queues are only touched from the loop thread.
"""

import asyncio
import logging

__all__ = ["add_subscriber", "broadcast_message", "remove_subscriber", "subscriber_count"]

logger = logging.getLogger(__name__)

_subscriber_queues: list[asyncio.Queue[str]] = []


def add_subscriber(queue: asyncio.Queue[str]) -> None:
    """Register a client queue to receive every broadcast message."""
    _subscriber_queues.append(queue)
    logger.debug("Subscriber added (%d active)", len(_subscriber_queues))


def remove_subscriber(queue: asyncio.Queue[str]) -> None:
    _subscriber_queues.remove(queue)
    logger.debug("Subscriber removed (%d active)", len(_subscriber_queues))


def subscriber_count() -> int:
    return len(_subscriber_queues)


def _enqueue_message(queue: asyncio.Queue[str], message: str) -> None:
    # Drop the oldest message so a slow client lags instead of blocking.
    if queue.full():
        queue.get_nowait()
    queue.put_nowait(message)


def broadcast_message(message: str, loop: asyncio.AbstractEventLoop) -> None:
    """Queue ``message`` for every subscriber; callable from any thread."""
    for queue in list(_subscriber_queues):
        loop.call_soon_threadsafe(_enqueue_message, queue, message)
