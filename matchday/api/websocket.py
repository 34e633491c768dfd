"""WebSocket broadcast hub.

Keeps the set of connected clients and fans match events out to them.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

logger = logging.getLogger(__name__)
router = APIRouter()


@dataclass
class MatchEvent:
    """An event pushed to subscribers."""

    type: str  # "match_created" | "match_updated"
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "data": self.data}


class WebSocketHub:
    """In-process registry of WebSocket subscribers."""

    def __init__(self):
        self._clients: set[WebSocket] = set()
        self._lock = asyncio.Lock()

    @property
    def client_count(self) -> int:
        return len(self._clients)

    async def connect(self, ws: WebSocket) -> None:
        await ws.accept()
        async with self._lock:
            self._clients.add(ws)
        await ws.send_json({"type": "welcome"})
        logger.debug(f"WebSocket client connected ({self.client_count} total)")

    async def disconnect(self, ws: WebSocket) -> None:
        async with self._lock:
            self._clients.discard(ws)
        logger.debug(f"WebSocket client disconnected ({self.client_count} total)")

    async def broadcast(self, event: MatchEvent) -> int:
        """Send an event to every connected client.

        Clients that fail to receive are dropped.

        Returns:
            Number of clients the event was delivered to
        """
        async with self._lock:
            clients = list(self._clients)

        payload = event.to_dict()
        delivered = 0
        for ws in clients:
            try:
                await ws.send_json(payload)
                delivered += 1
            except Exception as e:
                logger.warning(f"Dropping WebSocket client after send failure: {e}")
                await self.disconnect(ws)
        return delivered


@router.websocket("/ws")
async def match_updates(ws: WebSocket) -> None:
    """Subscribe to match_created / match_updated events."""
    hub: WebSocketHub = ws.app.state.ws_hub
    await hub.connect(ws)
    try:
        # Inbound messages are ignored; the loop only detects disconnects
        while True:
            await ws.receive_text()
    except WebSocketDisconnect:
        pass
    finally:
        await hub.disconnect(ws)
