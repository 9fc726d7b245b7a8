"""Shared error types for the voice relay."""

from __future__ import annotations


class UpstreamError(Exception):
    """A collaborator call failed; the message is shown to the client as-is."""


class EncodingError(UpstreamError):
    """Raw PCM could not be framed into an audio container."""


class TranscriptionError(UpstreamError):
    """The speech-to-text call failed."""


class CompletionError(UpstreamError):
    """The chat-completion call failed."""


__all__ = ["CompletionError", "EncodingError", "TranscriptionError", "UpstreamError"]
