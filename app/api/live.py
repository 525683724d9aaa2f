"""
WebSocket delivery of live queries.

Each connection owns one :class:`Subscription`.  Snapshots produced on
writer threads are handed to the event loop and kept in a one-slot
queue, so a slow client only ever receives the latest state.  The
subscription is cancelled when the client disconnects.
"""

import asyncio
import logging
from typing import Any, Callable

from fastapi import WebSocket
from starlette.concurrency import run_in_threadpool
from starlette.websockets import WebSocketDisconnect

from app.db.changes import Subscription

logger = logging.getLogger(__name__)

Subscribe = Callable[[Callable[[list], None], Callable[[Exception], None]], Subscription]


async def stream_snapshots(websocket: WebSocket, subscribe: Subscribe, serialize: Callable[[list], Any]) -> None:
    """Push ``{"type": "snapshot" | "error", ...}`` messages until the client goes away."""
    loop = asyncio.get_running_loop()
    latest: asyncio.Queue = asyncio.Queue(maxsize=1)

    def offer(message: dict) -> None:
        if latest.full():
            latest.get_nowait()
        latest.put_nowait(message)

    def on_change(rows: list) -> None:
        message = { "type": "snapshot", "data": serialize(rows) }
        loop.call_soon_threadsafe(offer, message)

    def on_error(exc: Exception) -> None:
        logger.error("Live query failed: %s", exc)
        loop.call_soon_threadsafe(offer, { "type": "error", "detail": getattr(exc, "message", str(exc)) })

    async def pump() -> None:
        while True:
            await websocket.send_json(await latest.get())

    subscription = await run_in_threadpool(subscribe, on_change, on_error)
    sender = asyncio.create_task(pump())
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
    except WebSocketDisconnect:
        pass
    finally:
        subscription.cancel()
        sender.cancel()
        await asyncio.gather(sender, return_exceptions=True)
