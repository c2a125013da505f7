"""FastAPI web server streaming decoded NMEA sentences over WebSocket.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

WebSocket clients connect to ``ws://<host>:8000/ws`` and receive one JSON
message per sentence that gpsd relays and the decoder accepts, in the form
produced by ``gpsnmea.output.sample_to_json``::

    {"type": "GNRMC", "data": {"type": "GNRMC", "utc_time": "211041.00", ...}}
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager

from fastapi import FastAPI, WebSocket, WebSocketDisconnect

from gpsnmea.gnss import NMEAReader
from server.broadcaster import add_subscriber, remove_subscriber, subscriber_count
from server.stream import run_nmea_loop

logger = logging.getLogger(__name__)

_QUEUE_MAX_SIZE = 10
_TIMEOUT_SECONDS = 5.0


@asynccontextmanager
async def _lifespan(_application: FastAPI) -> AsyncIterator[None]:
    loop = asyncio.get_running_loop()
    executor = ThreadPoolExecutor(max_workers=1)
    with NMEAReader() as gnss:
        reader_done = loop.run_in_executor(executor, run_nmea_loop, loop, gnss)
        try:
            yield
        finally:
            gnss.cancel()
            await reader_done
    executor.shutdown(wait=False)


app = FastAPI(lifespan=_lifespan)


async def _send_messages_until_disconnect(
    queue: asyncio.Queue[str],
    websocket: WebSocket,
) -> None:
    try:
        while True:
            message = await asyncio.wait_for(queue.get(), timeout=_TIMEOUT_SECONDS)
            await websocket.send_text(message)
    except TimeoutError:
        await websocket.close(code=1001)
    except WebSocketDisconnect:
        pass


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Stream decoded NMEA sentences to a connected WebSocket client.

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
        logger.info("Client connected (%d subscribers)", subscriber_count())
        await _send_messages_until_disconnect(queue, websocket)
    finally:
        remove_subscriber(queue)
