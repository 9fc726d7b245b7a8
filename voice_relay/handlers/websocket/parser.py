"""Classify inbound ASGI WebSocket messages and text commands."""

from __future__ import annotations

from typing import Any

from voice_relay.config.websocket import WS_CMD_PING, WS_CMD_TEXT_PREFIX, WS_CMD_CLEAR_CONTEXT
from voice_relay.state.frames import (
    Ping,
    TextFrame,
    CloseFrame,
    DirectText,
    BinaryFrame,
    TextCommand,
    ClearContext,
    InboundFrame,
    Unrecognized,
)


def parse_text_command(raw: str) -> TextCommand:
    if raw == WS_CMD_PING:
        return Ping()
    if raw == WS_CMD_CLEAR_CONTEXT:
        return ClearContext()
    if raw.startswith(WS_CMD_TEXT_PREFIX):
        return DirectText(text=raw[len(WS_CMD_TEXT_PREFIX) :])
    return Unrecognized(raw=raw)


def classify_message(message: dict[str, Any]) -> InboundFrame | None:
    """Map a Starlette `receive()` message to a frame; None if there is nothing to handle."""
    msg_type = message.get("type")
    if msg_type == "websocket.disconnect":
        return CloseFrame(code=message.get("code"))
    if msg_type != "websocket.receive":
        return None
    data = message.get("bytes")
    if data is not None:
        return BinaryFrame(data=bytes(data))
    text = message.get("text")
    if text is not None:
        return TextFrame(text=text)
    return None


__all__ = ["classify_message", "parse_text_command"]
