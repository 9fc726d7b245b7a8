"""HTTP server bind configuration (env-resolved constants only)."""

from __future__ import annotations

from .env import get_int, get_str

SERVER_HOST: str = get_str("HOST", "0.0.0.0")
SERVER_PORT: int = get_int("PORT", 3000)

STATUS_MESSAGE = "Voice Assistant Server"

__all__ = ["SERVER_HOST", "SERVER_PORT", "STATUS_MESSAGE"]
