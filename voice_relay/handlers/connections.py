"""WebSocket connection admission control."""

from __future__ import annotations

import uuid
import asyncio
from typing import Any


class ConnectionManager:
    """Cap concurrent sessions process-wide and hand out session ids for logs."""

    def __init__(self, *, max_connections: int) -> None:
        self._max = max(1, int(max_connections))
        self._lock = asyncio.Lock()
        self._active: dict[int, str] = {}

    async def connect(self, ws: Any) -> str | None:
        """Admit a websocket (without accepting it); return its session id or None when full."""
        key = id(ws)
        async with self._lock:
            if key in self._active:
                return self._active[key]
            if len(self._active) >= self._max:
                return None
            session_id = uuid.uuid4().hex[:12]
            self._active[key] = session_id
            return session_id

    async def disconnect(self, ws: Any) -> None:
        async with self._lock:
            self._active.pop(id(ws), None)

    def get_connection_count(self) -> int:
        return len(self._active)


__all__ = ["ConnectionManager"]
