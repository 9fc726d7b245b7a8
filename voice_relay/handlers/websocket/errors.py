"""Send helpers for plain-text WebSocket replies."""

from __future__ import annotations

import logging

from fastapi import WebSocket, WebSocketDisconnect

logger = logging.getLogger(__name__)


async def safe_send_text(ws: WebSocket, text: str) -> bool:
    try:
        await ws.send_text(text)
    except WebSocketDisconnect:
        return False
    except Exception:
        logger.debug("WebSocket send failed", exc_info=True)
        return False
    return True


async def reject_connection(ws: WebSocket, *, message: str, close_code: int) -> None:
    # Accept so the client sees a reason, then close.
    try:
        await ws.accept()
    except Exception:
        return
    await safe_send_text(ws, message)
    try:
        await ws.close(code=close_code, reason=message)
    except Exception:
        return


__all__ = ["reject_connection", "safe_send_text"]
