"""Client-visible text notices sent back over the WebSocket."""

from __future__ import annotations

MSG_PONG = "pong"
MSG_CONTEXT_CLEARED = "Context cleared! Starting a new conversation."
MSG_BUSY = "Please wait, the previous request is still being processed."
MSG_COOLDOWN_TEMPLATE = "Please wait {seconds} seconds before the next request."
MSG_ERROR_TEMPLATE = "Error: {cause}"
MSG_NO_AUDIO = "No audio data"
MSG_UTTERANCE_TOO_LONG = "Recording is too long; send the end marker and start a new one."
MSG_SERVER_AT_CAPACITY = "Server cannot accept new connections. Please try again later."


def format_cooldown(seconds: int) -> str:
    return MSG_COOLDOWN_TEMPLATE.format(seconds=seconds)


def format_error(cause: str) -> str:
    return MSG_ERROR_TEMPLATE.format(cause=cause)


__all__ = [
    "MSG_BUSY",
    "MSG_CONTEXT_CLEARED",
    "MSG_COOLDOWN_TEMPLATE",
    "MSG_ERROR_TEMPLATE",
    "MSG_NO_AUDIO",
    "MSG_PONG",
    "MSG_SERVER_AT_CAPACITY",
    "MSG_UTTERANCE_TOO_LONG",
    "format_cooldown",
    "format_error",
]
