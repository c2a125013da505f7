"""Fan-out of decoded NMEA sentences to WebSocket clients.

Every connected client owns one bounded queue of JSON strings. The gpsd
reader thread serializes each decoded sentence once with
``gpsnmea.output.sample_to_json`` and hands the same string to every queue
on the event loop.
"""

import asyncio

from gpsnmea.nmea import Sample
from gpsnmea.output import sample_to_json

__all__ = [
    "add_subscriber",
    "broadcast_sample",
    "remove_subscriber",
    "subscriber_count",
]

_client_queues: list[asyncio.Queue[str]] = []


def add_subscriber(queue: asyncio.Queue[str]) -> None:
    """Register a client queue; it receives every sentence from now on."""
    _client_queues.append(queue)


def remove_subscriber(queue: asyncio.Queue[str]) -> None:
    _client_queues.remove(queue)


def subscriber_count() -> int:
    return len(_client_queues)


def _put_dropping_oldest(queue: asyncio.Queue[str], payload: str) -> None:
    # A full queue belongs to a slow client; its oldest sentence is discarded
    if queue.full():
        queue.get_nowait()
    queue.put_nowait(payload)


def broadcast_sample(sample: Sample, loop: asyncio.AbstractEventLoop) -> None:
    """Serialize one decoded sentence and queue it for every client.

    Called from the gpsd reader thread. The queues are only touched on
    ``loop``, so each put is scheduled with ``call_soon_threadsafe``.

    Args:
        sample: A sentence accepted by ``gpsnmea.nmea.parse``.
        loop: The event loop that owns the client queues.
    """
    payload = sample_to_json(sample)
    for queue in list(_client_queues):
        loop.call_soon_threadsafe(_put_dropping_oldest, queue, payload)
