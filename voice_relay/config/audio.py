"""Raw capture format agreed with the client (env-resolved constants only)."""

from __future__ import annotations

from .env import get_int

# Browser clients capture 16kHz mono and send little-endian PCM16.
AUDIO_SAMPLE_RATE_HZ: int = max(1, get_int("AUDIO_SAMPLE_RATE_HZ", 16000))
AUDIO_CHANNELS: int = max(1, get_int("AUDIO_CHANNELS", 1))
AUDIO_SAMPLE_WIDTH_BYTES: int = max(1, get_int("AUDIO_SAMPLE_WIDTH_BYTES", 2))

AUDIO_BYTES_PER_SECOND: int = AUDIO_SAMPLE_RATE_HZ * AUDIO_CHANNELS * AUDIO_SAMPLE_WIDTH_BYTES

__all__ = [
    "AUDIO_BYTES_PER_SECOND",
    "AUDIO_CHANNELS",
    "AUDIO_SAMPLE_RATE_HZ",
    "AUDIO_SAMPLE_WIDTH_BYTES",
]
