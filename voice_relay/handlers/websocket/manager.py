"""Primary WebSocket connection handler orchestration."""

from __future__ import annotations

import logging
import contextlib

from fastapi import WebSocket

from voice_relay.state import RuntimeDeps
from voice_relay.config.websocket import WS_CLOSE_BUSY_CODE
from voice_relay.config.messages import MSG_SERVER_AT_CAPACITY
from voice_relay.handlers.session.engine import SessionEngine

from .errors import reject_connection

logger = logging.getLogger(__name__)


async def _prepare_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> str | None:
    session_id = await runtime_deps.connections.connect(ws)
    if session_id is None:
        logger.warning("WebSocket rejected: server at capacity")
        await reject_connection(ws, message=MSG_SERVER_AT_CAPACITY, close_code=WS_CLOSE_BUSY_CODE)
        return None

    try:
        await ws.accept()
    except Exception:
        with contextlib.suppress(Exception):
            await runtime_deps.connections.disconnect(ws)
        raise
    return session_id


async def handle_websocket_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> None:
    session_id = await _prepare_connection(ws, runtime_deps)
    if session_id is None:
        return

    engine = SessionEngine(
        ws,
        settings=runtime_deps.settings.session(),
        assistant=runtime_deps.assistant,
        framer=runtime_deps.framer,
        session_id=session_id,
    )
    logger.info(
        "WebSocket connection accepted session_id=%s. Active: %s",
        session_id,
        runtime_deps.connections.get_connection_count(),
    )
    try:
        await engine.run()
    except Exception:
        logger.exception("session %s: unexpected error", session_id)
        with contextlib.suppress(Exception):
            await ws.close()
    finally:
        with contextlib.suppress(Exception):
            await runtime_deps.connections.disconnect(ws)
        logger.info(
            "WebSocket connection closed session_id=%s turns=%s. Active: %s",
            session_id,
            len(engine.context),
            runtime_deps.connections.get_connection_count(),
        )


__all__ = ["handle_websocket_connection"]
