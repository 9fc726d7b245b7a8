"""Configuration module exports (env-resolved constants only)."""

from .limits import (
    REQUEST_COOLDOWN_S,
    MAX_CONCURRENT_CONNECTIONS,
)

__all__ = [
    "MAX_CONCURRENT_CONNECTIONS",
    "REQUEST_COOLDOWN_S",
]
