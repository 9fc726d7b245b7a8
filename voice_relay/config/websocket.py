"""WebSocket protocol configuration and constants."""

from __future__ import annotations

from .env import get_str, get_bool

WS_ENDPOINT_PATH = "/ws"

# Close code for connections rejected at capacity
WS_CLOSE_BUSY_CODE = 4002

# Text control messages
WS_CMD_PING = "ping"
WS_CMD_CLEAR_CONTEXT = "clear_context"
WS_CMD_TEXT_PREFIX = "text:"

# End-of-utterance marker appended inline to the binary audio stream.
END_OF_UTTERANCE_MARKER: bytes = get_str("END_OF_UTTERANCE_MARKER", "END_STREAM").encode("ascii")

# Clients send the marker at the end of a chunk or as its own frame, so markers
# split across two frames are not looked for unless enabled.
MARKER_SPAN_CHUNKS: bool = get_bool("MARKER_SPAN_CHUNKS", False)

__all__ = [
    "END_OF_UTTERANCE_MARKER",
    "MARKER_SPAN_CHUNKS",
    "WS_CLOSE_BUSY_CODE",
    "WS_CMD_CLEAR_CONTEXT",
    "WS_CMD_PING",
    "WS_CMD_TEXT_PREFIX",
    "WS_ENDPOINT_PATH",
]
