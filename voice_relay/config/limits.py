"""Admission control and rate limit configuration (env-resolved constants only)."""

from __future__ import annotations

import os

from .audio import AUDIO_BYTES_PER_SECOND
from .env import DISABLED_VALUES, get_int, get_float

# Minimum spacing between completed requests on one connection. <= 0 disables it.
REQUEST_COOLDOWN_S: float = max(0.0, get_float("REQUEST_COOLDOWN_S", 5.0))

# Upper bound on a single utterance's audio duration. Protects memory when clients
# stream continuously without ever sending the end-of-utterance marker.
_MAX_UTTERANCE_AUDIO_SECONDS_RAW = (os.getenv("MAX_UTTERANCE_AUDIO_SECONDS") or "").strip()
if _MAX_UTTERANCE_AUDIO_SECONDS_RAW.lower() in DISABLED_VALUES:
    MAX_UTTERANCE_AUDIO_SECONDS: float = 0.0
else:
    MAX_UTTERANCE_AUDIO_SECONDS = max(0.0, get_float("MAX_UTTERANCE_AUDIO_SECONDS", float(5 * 60)))

if MAX_UTTERANCE_AUDIO_SECONDS:
    MAX_UTTERANCE_AUDIO_BYTES: int = int(MAX_UTTERANCE_AUDIO_SECONDS * AUDIO_BYTES_PER_SECOND)
else:
    MAX_UTTERANCE_AUDIO_BYTES = 0

MAX_CONCURRENT_CONNECTIONS: int = max(1, get_int("MAX_CONCURRENT_CONNECTIONS", 100))

__all__ = [
    "MAX_CONCURRENT_CONNECTIONS",
    "MAX_UTTERANCE_AUDIO_BYTES",
    "MAX_UTTERANCE_AUDIO_SECONDS",
    "REQUEST_COOLDOWN_S",
]
